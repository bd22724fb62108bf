"""Abstract contract for monotonically increasing id generation."""

from abc import ABC, abstractmethod


class SequenceCounter(ABC):
    """Named counters with an atomic increment."""

    @abstractmethod
    def next_id(self, *, name: str) -> int:
        """Atomically increment ``name`` and return the new value.

        Values returned for one name are unique and strictly increasing
        in issuance order, across concurrent callers.

        Raises:
            SequenceCounterError: If the increment fails
        """
