from typing import Dict, List, Union

Estimate = Union[int, float]


class EstimationLedger:
    """Participant name -> estimate, in first-submission order.

    Python dicts keep insertion order and an overwrite does not move the key,
    so a participant who changes their estimate keeps their place in the
    "who has answered" list.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Estimate] = {}

    def record(self, name: str, value: Estimate) -> None:
        self._entries[name] = value

    def names(self) -> List[str]:
        return list(self._entries)

    def snapshot(self) -> Dict[str, Estimate]:
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"EstimationLedger({self._entries!r})"
