"""Strategy holder: sorts lists with whichever strategy is currently set."""

from typing import List

from patterns.observability import get_logger
from patterns.sorting import SortingStrategy


class Sorter:
    """Holds one active SortingStrategy and delegates sort() to it."""

    def __init__(self, strategy: SortingStrategy) -> None:
        self._strategy = strategy
        self._logger = get_logger("patterns.sorter")

    @property
    def strategy(self) -> SortingStrategy:
        return self._strategy

    def set_strategy(self, strategy: SortingStrategy) -> None:
        """Replace the active strategy. The previous one is dropped."""
        self._logger.info(
            "strategy_changed",
            extra={"previous": repr(self._strategy), "current": repr(strategy)},
        )
        self._strategy = strategy

    def sort(self, values: List[int]) -> None:
        """Sort ``values`` in place using the active strategy."""
        self._logger.info(
            "sorting",
            extra={"strategy": repr(self._strategy), "size": len(values)},
        )
        self._strategy.sort(values)

    def __repr__(self) -> str:
        return f"Sorter(strategy={self._strategy!r})"
