"""Text output for built teams."""

from rdteams.models import (
    AssignmentConfig, AssignmentResult, HostingCapability, Participant,
)


def _seats_label(p: Participant) -> str:
    return str(p.num_seats) if p.has_defined_seats() else "?"


def format_teams(result: AssignmentResult, config: AssignmentConfig,
                 event_name: str = "") -> str:
    """Format teams as a human-readable list, members ordered by number."""
    lines = []
    lines.append("=" * 60)
    title = "RUNNING DINNER TEAMS"
    if event_name:
        title += f" - {event_name}"
    lines.append(title)
    lines.append("=" * 60)
    lines.append(
        f"{len(result.teams)} teams of {config.team_size}, "
        f"{config.course_count} courses, hosts need {config.needed_seats} seats"
    )

    markers = {
        HostingCapability.TRUE: "H",
        HostingCapability.FALSE: " ",
        HostingCapability.UNKNOWN: "?",
    }

    for team in result.teams:
        lines.append(f"\n--- TEAM {team.number} ---")
        for p in sorted(team.members, key=lambda m: m.number):
            mark = markers[config.can_host(p)]
            lines.append(
                f"  [{mark}] #{p.number:<4} {p.name:<30} seats: {_seats_label(p)}"
            )

    if result.not_assigned:
        lines.append(f"\n{'=' * 60}")
        lines.append(f"NOT ASSIGNED ({len(result.not_assigned)})")
        lines.append("=" * 60)
        for p in result.not_assigned:
            lines.append(f"      #{p.number:<4} {p.name:<30} seats: {_seats_label(p)}")

    return "\n".join(lines)
