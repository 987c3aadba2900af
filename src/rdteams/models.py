"""Data models for the running dinner team builder."""

from dataclasses import dataclass, field
from enum import Enum


# Seat count for participants who did not declare one. Never a real count.
UNDEFINED_SEATS = -1


class HostingCapability(Enum):
    TRUE = "yes"
    FALSE = "no"
    UNKNOWN = "unknown"


@dataclass(eq=False)
class Participant:
    """A registered participant.

    Equality and hashing are by identity: two people with the same name and
    seat count are still two participants.
    """
    number: int
    name: str
    num_seats: int = UNDEFINED_SEATS
    email: str = ""
    mobile_number: str = ""

    def has_defined_seats(self) -> bool:
        return self.num_seats != UNDEFINED_SEATS

    def __repr__(self) -> str:
        return f"Participant({self.number}, {self.name!r}, seats={self.num_seats})"


@dataclass(frozen=True)
class AssignmentConfig:
    """Settings that drive team building for one event."""
    team_size: int
    course_count: int
    strict_capacity_balancing: bool = True

    def __post_init__(self):
        if self.team_size < 1:
            raise ValueError(f"team_size must be at least 1, got {self.team_size}")
        if self.course_count < 1:
            raise ValueError(f"course_count must be at least 1, got {self.course_count}")

    @property
    def needed_seats(self) -> int:
        """Seats a host needs to seat every team at one course."""
        return self.team_size * self.course_count

    def can_host(self, participant: Participant) -> HostingCapability:
        if not participant.has_defined_seats():
            return HostingCapability.UNKNOWN
        if participant.num_seats >= self.needed_seats:
            return HostingCapability.TRUE
        return HostingCapability.FALSE


@dataclass
class Team:
    """A team of participants, numbered in build order starting at 1."""
    number: int
    members: set[Participant] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.members)


@dataclass
class AssignmentResult:
    """Teams built for an event plus the participants left over."""
    teams: list[Team] = field(default_factory=list)
    not_assigned: list[Participant] = field(default_factory=list)

    @property
    def assigned(self) -> list[Participant]:
        return [p for team in self.teams for p in team.members]
