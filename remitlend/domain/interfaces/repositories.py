"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from remitlend.domain.entities import RemittanceRecord, ScoreRecord


class ScoreRepository(ABC):
    """
    Abstract repository for stored scores.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, record: ScoreRecord) -> ScoreRecord:
        """
        Persist a score record.

        Args:
            record: The record to save

        Returns:
            The saved record with its generated id populated
        """
        ...

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[ScoreRecord]:
        """
        Retrieve the score record for a user.

        Args:
            user_id: The user's identifier

        Returns:
            The record if found, None otherwise
        """
        ...


class RemittanceRepository(ABC):
    """Abstract repository for remittance history."""

    @abstractmethod
    async def save(self, record: RemittanceRecord) -> RemittanceRecord:
        """Persist a remittance record."""
        ...

    @abstractmethod
    async def exists(self, user_id: str, month: str) -> bool:
        """Whether a record for this user and month is already stored."""
        ...

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[RemittanceRecord]:
        """
        Retrieve a user's remittance history.

        Args:
            user_id: The user's identifier

        Returns:
            Records in insertion order
        """
        ...
