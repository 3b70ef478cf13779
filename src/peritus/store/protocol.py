"""
Protocol definition for expert stores.
Lets the dashboard run against a file or an in-memory backing container.
"""

from typing import List, Protocol

from ..schemas.expert import Expert


class ExpertStore(Protocol):
    """
    Interface every expert store implements.

    Each call reconciles with the backing container by reading it in full;
    implementations cache nothing and are not safe to share between threads.
    """

    def load(self) -> List[Expert]:
        """
        Read the full sequence.

        Returns:
            Experts in stored order

        Raises:
            StoreReadError: Container unreadable
            StoreParseError: Content is not a valid expert sequence
        """
        ...

    def append(self, expert: Expert) -> List[Expert]:
        """
        Append one expert and persist the full sequence.

        Returns:
            The sequence after the append

        Raises:
            StoreReadError, StoreParseError, StoreWriteError
        """
        ...

    def remove_at(self, index: int) -> None:
        """
        Remove the expert at index and persist the full sequence.

        Raises:
            IndexOutOfRange: index is not a valid position
            StoreReadError, StoreParseError, StoreWriteError
        """
        ...

    def get(self, index: int) -> Expert:
        """
        Look up one expert by position.

        Raises:
            IndexOutOfRange: index is not a valid position
            StoreReadError, StoreParseError
        """
        ...
