"""Interface for member repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.member import Member
from ...config import logger as log
from ..errors import RepositoryError


class IMemberRepository(ABC):
    """Contract for member data access.

    The abstract ``fetch_*`` queries raise RepositoryError when the store
    fails. The public operations never raise: they log and return an empty
    result instead.
    """

    @abstractmethod
    def fetch_all(self) -> list[Member]:
        """Gets all members ordered by name."""
        pass

    @abstractmethod
    def fetch_by_id(self, member_id: int) -> Optional[Member]:
        """Gets a member by ID."""
        pass

    def list_members(self) -> list[Member]:
        """Lists all members ordered by name, empty on failure."""
        try:
            return self.fetch_all()
        except RepositoryError as e:
            log.error("repo.member", "Error fetching members", error=str(e))
            return []

    def get_member(self, member_id: int) -> Optional[Member]:
        """Gets a member by ID, None if missing or on failure."""
        try:
            return self.fetch_by_id(member_id)
        except RepositoryError as e:
            log.error(
                "repo.member", "Error fetching member", member_id=member_id, error=str(e)
            )
            return None
