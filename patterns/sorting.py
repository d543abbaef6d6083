"""Sorting strategies used by Sorter. Each sorts a list of ints ascending, in place."""

from abc import ABC, abstractmethod
from typing import List


class SortingStrategy(ABC):
    """Abstract base class for in-place ascending sorts."""

    @abstractmethod
    def sort(self, values: List[int]) -> None:
        """Sort ``values`` in place. Must be implemented by subclasses."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class BubbleSort(SortingStrategy):
    """Classic adjacent-swap bubble sort. O(n^2), stable."""

    def sort(self, values: List[int]) -> None:
        print("BubbleSort виконується...")
        n = len(values)
        for i in range(n - 1):
            for j in range(n - i - 1):
                if values[j] > values[j + 1]:
                    values[j], values[j + 1] = values[j + 1], values[j]


class QuickSort(SortingStrategy):
    """Delegates to the built-in list sort."""

    def sort(self, values: List[int]) -> None:
        print("QuickSort виконується...")
        values.sort()
