#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for data persistence.

Separates how a document is stored from the commands that read and mutate it.
"""

from datetime import datetime
from typing import Protocol, TypeVar

T = TypeVar("T")


class DataStore(Protocol[T]):
    """
    Protocol for data persistence and metadata queries.

    Type parameter T is the in-memory document type loaded and saved by the
    store (e.g. the expense Store).
    """

    def exists(self) -> bool:
        """
        Check if data exists in storage.

        Returns:
            True if the backing file exists, False otherwise
        """
        ...

    def load(self) -> T:
        """
        Load data from storage.

        Returns:
            The loaded document

        Raises:
            StoreError: If the data cannot be read or is corrupted
        """
        ...

    def save(self, data: T) -> None:
        """
        Save data to storage, replacing what was there.

        Raises:
            StoreError: If the data cannot be written
        """
        ...

    def last_modified(self) -> datetime | None:
        """Timestamp of the last write, or None if data doesn't exist."""
        ...

    def age_days(self) -> int | None:
        """Days since last modification, or None if data doesn't exist."""
        ...

    def item_count(self) -> int | None:
        """Count of records in stored data, or None if data doesn't exist."""
        ...

    def size_bytes(self) -> int | None:
        """Storage size in bytes, or None if data doesn't exist."""
        ...

    def summary_text(self) -> str:
        """Brief human-readable description of the current data state."""
        ...
