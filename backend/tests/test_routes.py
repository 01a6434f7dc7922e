import pytest

from conftest import TestConfig as BaseConfig


@pytest.fixture()
def log_file(tmp_path):
    return tmp_path / 'db' / 'logs.log'


@pytest.fixture()
def app_config(log_file):
    class LoggingConfig(BaseConfig):
        LOG_FILE = str(log_file)
        LOG_TAIL_LINES = 2
    return LoggingConfig


def test_host_and_player_pages(client):
    res = client.get('/host')
    assert res.status_code == 200
    assert b'subscribe' in res.data
    res.close()

    res = client.get('/player')
    assert res.status_code == 200
    assert b'addEstimation' in res.data
    res.close()


def test_log_file_is_created(flask_app, log_file):
    flask_app.logger.info('[probe] hello')
    assert log_file.exists()
    assert '[probe] hello' in log_file.read_text()


def test_logs_tail(flask_app, client, log_file):
    for i in range(5):
        flask_app.logger.info(f'[probe] line {i}')
    res = client.get('/logs')
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert body.startswith('<pre>')
    assert 'line 4' in body
    assert 'line 3' in body
    assert 'line 2' not in body


def test_logs_escapes_html(flask_app, client):
    flask_app.logger.info('<script>x</script>')
    body = client.get('/logs').get_data(as_text=True)
    assert '<script>' not in body
    assert '&lt;script&gt;' in body


def test_tail_logs_command(flask_app):
    flask_app.logger.info('[probe] from cli')
    result = flask_app.test_cli_runner().invoke(args=['tail-logs', '-n', '1'])
    assert result.exit_code == 0
    assert '[probe] from cli' in result.output


def test_logs_unavailable_without_log_file():
    from estimator import create_app

    class NoFileConfig(BaseConfig):
        LOG_FILE = ''

    application = create_app(NoFileConfig)
    res = application.test_client().get('/logs')
    assert res.status_code == 500
    assert 'Error' in res.get_data(as_text=True)


def test_icon_and_web_assets(client):
    res = client.get('/icon.png')
    assert res.status_code == 200
    assert res.mimetype == 'image/png'
    res.close()

    res = client.get('/host.html')
    assert res.status_code == 200
    res.close()

    assert client.get('/missing.css').status_code == 404
    assert client.get('/../config.py').status_code == 404


def test_api_routes_win_over_web_assets(client):
    assert client.get('/getTask').status_code == 200
