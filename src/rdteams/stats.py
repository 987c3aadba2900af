"""Hosting balance statistics for built teams."""

from rdteams.models import AssignmentConfig, AssignmentResult, HostingCapability


def compute_stats(result: AssignmentResult, config: AssignmentConfig) -> dict:
    """Count hosting capability per team and across all teams.

    Returns dict with:
    - per_team: team number -> {can_host, cannot_host, unknown, size}
    - totals: {can_host, cannot_host, unknown} over all assigned participants
    - host_spread: max - min can_host count per team (0 when no teams)
    - teams_without_host: team numbers with no confirmed host
    - not_assigned_count
    """
    per_team: dict[int, dict] = {}
    totals = {"can_host": 0, "cannot_host": 0, "unknown": 0}
    keys = {
        HostingCapability.TRUE: "can_host",
        HostingCapability.FALSE: "cannot_host",
        HostingCapability.UNKNOWN: "unknown",
    }

    for team in result.teams:
        counts = {"can_host": 0, "cannot_host": 0, "unknown": 0}
        for p in team.members:
            key = keys[config.can_host(p)]
            counts[key] += 1
            totals[key] += 1
        counts["size"] = len(team.members)
        per_team[team.number] = counts

    host_counts = [c["can_host"] for c in per_team.values()]
    host_spread = max(host_counts) - min(host_counts) if host_counts else 0

    return {
        "per_team": per_team,
        "totals": totals,
        "host_spread": host_spread,
        "teams_without_host": [n for n, c in per_team.items() if c["can_host"] == 0],
        "not_assigned_count": len(result.not_assigned),
        "needed_seats": config.needed_seats,
    }


def format_stats_report(stats: dict) -> str:
    """Format statistics into a human-readable report."""
    lines = []
    lines.append("=" * 50)
    lines.append("HOSTING BALANCE")
    lines.append("=" * 50)
    lines.append(f"Seats needed to host: {stats['needed_seats']}")

    def _z(v, width=6):
        """Format an integer, suppressing zeros to blank."""
        if v == 0:
            return " " * width
        return f"{v:>{width}}"

    lines.append(f"\n{'Team':<6} {'Host':>6} {'NoHost':>6} {'Unkn':>6} {'Size':>6}")
    lines.append("-" * 34)
    for number, c in sorted(stats["per_team"].items()):
        lines.append(
            f"{number:<6} {_z(c['can_host'])} {_z(c['cannot_host'])} "
            f"{_z(c['unknown'])} {c['size']:>6}"
        )
    lines.append("-" * 34)
    t = stats["totals"]
    lines.append(
        f"{'Total':<6} {t['can_host']:>6} {t['cannot_host']:>6} {t['unknown']:>6} "
        f"{sum(t.values()):>6}"
    )

    lines.append(f"\nHost spread (max-min per team): {stats['host_spread']}")
    if stats["teams_without_host"]:
        nums = ", ".join(str(n) for n in stats["teams_without_host"])
        lines.append(f"Teams without a confirmed host: {nums}")
    else:
        lines.append("Every team has a confirmed host")
    lines.append(f"Not assigned: {stats['not_assigned_count']}")

    return "\n".join(lines)
