"""Team building for the running dinner.

Six steps, each feeding the next:
1. Validate - team size must be smaller than the number of participants
2. Split - participants that cannot fill a whole team are set aside
3. Shuffle - remove any bias from the input order (e.g. alphabetical)
4. Classify - can host / cannot host / unknown, by declared seats
5. Balance - spread participants so both hosting queues are about equal
6. Assemble - fill each team by polling the two queues alternately

Everything here is a pure function of its inputs plus the random source
passed in. Nothing is printed and no module-level state is kept.
"""

import random
from collections import deque
from typing import Iterable

from rdteams.models import (
    AssignmentConfig, AssignmentResult, HostingCapability, Participant, Team,
)


class InfeasibleConfiguration(ValueError):
    """Raised when there are not enough participants for even one team."""


class TeamAssemblyExhausted(RuntimeError):
    """Raised when both hosting queues run dry while a team still has open slots."""


CAN_HOST = 0
CANNOT_HOST = 1


def validate_team_size(num_participants: int, team_size: int) -> None:
    if team_size >= num_participants:
        raise InfeasibleConfiguration(
            f"There must be more participants than a team's size "
            f"({num_participants} participants, team size {team_size})"
        )


def split_pool(participants: list[Participant],
               team_size: int) -> tuple[list[Participant], list[Participant]]:
    """Split participants into the assignable pool and the leftovers.

    The leftovers are the last ``len(participants) % team_size`` participants
    in the order given. The assignable pool is everything before them, so its
    size is always a multiple of team_size.
    """
    remainder = len(participants) % team_size
    cut = len(participants) - remainder
    return list(participants[:cut]), list(participants[cut:])


def shuffle_pool(participants: list[Participant],
                 rng: random.Random) -> list[Participant]:
    """Return a shuffled copy of participants."""
    shuffled = list(participants)
    rng.shuffle(shuffled)
    return shuffled


def classify_by_capacity(participants: Iterable[Participant],
                         config: AssignmentConfig,
                         ) -> tuple[deque, deque, deque]:
    """Sort participants into (can_host, cannot_host, unknown) FIFO queues.

    Queue order follows input order; the assembler polls in that order.
    """
    can_host: deque = deque()
    cannot_host: deque = deque()
    unknown: deque = deque()

    for p in participants:
        capability = config.can_host(p)
        if capability is HostingCapability.UNKNOWN:
            unknown.append(p)
        elif capability is HostingCapability.TRUE:
            can_host.append(p)
        else:
            cannot_host.append(p)

    return can_host, cannot_host, unknown


def distribute_equally(left, source: Iterable, right) -> None:
    """Move each element of source to whichever of left/right is shorter.

    Ties go to right. The balance is greedy on the running sizes, so starting
    from two empty targets the sizes never differ by more than one.
    """
    for item in source:
        if len(left) < len(right):
            left.append(item)
        else:
            right.append(item)


def balance_queues(participants: list[Participant],
                   config: AssignmentConfig) -> tuple[deque, deque]:
    """Build the (can_host, cannot_host) queues the assembler polls from.

    With strict capacity balancing, participants with a known seat count are
    classified first and only the unknowns are spread between the two queues.
    Otherwise the whole pool is spread by running count alone.
    """
    if config.strict_capacity_balancing:
        can_host, cannot_host, unknown = classify_by_capacity(participants, config)
        distribute_equally(can_host, unknown, cannot_host)
        unknown.clear()
        return can_host, cannot_host

    can_host: deque = deque()
    cannot_host: deque = deque()
    distribute_equally(can_host, participants, cannot_host)
    return can_host, cannot_host


def _poll(queue: deque) -> Participant | None:
    return queue.popleft() if queue else None


def assemble_teams(can_host: deque, cannot_host: deque,
                   num_teams: int, team_size: int) -> list[Team]:
    """Fill num_teams teams by polling the two queues alternately.

    Each team starts at the can-host queue. The active queue flips after
    every poll; when a poll comes back empty the slot is filled from the
    other queue straight away. Earlier teams get first pick, and the queues
    are consumed in place.
    """
    queues = (can_host, cannot_host)
    teams = []

    for i in range(num_teams):
        members: set[Participant] = set()
        active = CAN_HOST

        for slot in range(team_size):
            member = _poll(queues[active])
            active = CANNOT_HOST if active == CAN_HOST else CAN_HOST
            if member is None:
                member = _poll(queues[active])
                if member is None:
                    raise TeamAssemblyExhausted(
                        f"Both queues empty while filling slot {slot + 1} "
                        f"of team {i + 1}"
                    )
            members.add(member)

        teams.append(Team(number=i + 1, members=members))

    return teams


def build_teams(participants: list[Participant], config: AssignmentConfig,
                rng: random.Random | None = None) -> AssignmentResult:
    """Partition participants into teams of config.team_size.

    Returns the built teams together with the participants that did not fit
    into a full team. Pass a seeded ``random.Random`` for reproducible teams;
    without one every call draws a fresh random source.
    """
    validate_team_size(len(participants), config.team_size)

    if rng is None:
        rng = random.Random()

    num_teams = len(participants) // config.team_size
    assignable, not_assigned = split_pool(participants, config.team_size)

    shuffled = shuffle_pool(assignable, rng)
    can_host, cannot_host = balance_queues(shuffled, config)
    teams = assemble_teams(can_host, cannot_host, num_teams, config.team_size)

    return AssignmentResult(teams=teams, not_assigned=not_assigned)
