"""Dependency injection container for repository access."""

from dataclasses import dataclass

from .repositories.interfaces.member_repository import IMemberRepository
from .repositories.interfaces.event_repository import IEventRepository
from .repositories.interfaces.availability_repository import IAvailabilityRepository


@dataclass
class Container:
    """Holds the repository instances a caller works with.

    Passed explicitly to whatever needs it; there is no process-wide instance.
    """

    members: IMemberRepository
    events: IEventRepository
    availability: IAvailabilityRepository
