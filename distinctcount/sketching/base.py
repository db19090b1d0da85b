"""Base protocols for cardinality sketches.

A sketch processes a stream of items with bounded memory and answers
approximate queries about it:
- Sketch: common operations (add, memory usage, item count)
- CardinalitySketch: distinct count estimation (HyperLogLog)
"""

from abc import ABC, abstractmethod
from typing import Any


class Sketch(ABC):
    """Base protocol for streaming sketches.

    Sketches support:
    - Adding items (with optional counts)
    - Estimating memory usage
    - Reporting how many items were added
    """

    @abstractmethod
    def add(self, item: Any, count: int = 1) -> None:
        """Add an item to the sketch.

        Args:
            item: The item to add.
            count: Number of occurrences to add (default 1).
        """

    @property
    @abstractmethod
    def memory_bytes(self) -> int:
        """Estimated memory usage in bytes."""

    @property
    @abstractmethod
    def item_count(self) -> int:
        """Total count of items added to the sketch.

        Returns:
            Sum of all counts added, duplicates included.
        """


class CardinalitySketch(Sketch):
    """Protocol for sketches that estimate cardinality (distinct count).

    Implementations: HyperLogLog
    """

    @abstractmethod
    def cardinality(self) -> int:
        """Estimate the number of distinct items.

        Returns:
            Estimated count of unique items added.
        """
