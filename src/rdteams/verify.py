"""Verification of built teams.

Checks that a result is a proper partition of the participant list.
Usage: rdteams-verify [participants.csv] [config.yaml] [--seed N]
"""

import argparse
import random
import sys
from pathlib import Path

from rdteams.config import load_config
from rdteams.models import (
    AssignmentConfig, AssignmentResult, HostingCapability, Participant,
)
from rdteams.participants import load_participants
from rdteams.teams import build_teams


def verify_assignment(result: AssignmentResult,
                      participants: list[Participant],
                      config: AssignmentConfig) -> dict:
    """Verify a result against the participant list it was built from.

    Returns dict with:
    - valid: bool (True if no errors)
    - errors: list of broken partition rules
    - warnings: list of teams without a confirmed host
    """
    errors = []
    warnings = []

    team_size = config.team_size
    expected_teams = len(participants) // team_size
    expected_left = len(participants) % team_size

    if len(result.teams) != expected_teams:
        errors.append(
            f"Expected {expected_teams} teams, got {len(result.teams)}"
        )

    for i, team in enumerate(result.teams):
        if team.number != i + 1:
            errors.append(f"Team at position {i + 1} is numbered {team.number}")
        if len(team.members) != team_size:
            errors.append(
                f"Team {team.number}: {len(team.members)} members "
                f"(expected {team_size})"
            )

    # Count appearances by identity
    known = {id(p) for p in participants}
    seen: dict[int, int] = {}
    for team in result.teams:
        for p in team.members:
            seen[id(p)] = seen.get(id(p), 0) + 1
            if id(p) not in known:
                errors.append(f"Team {team.number}: unknown participant {p.name}")
    for p in result.not_assigned:
        seen[id(p)] = seen.get(id(p), 0) + 1
        if id(p) not in known:
            errors.append(f"Not assigned: unknown participant {p.name}")

    for p in participants:
        count = seen.get(id(p), 0)
        if count == 0:
            errors.append(f"{p.name} (#{p.number}) is in no team and not in the leftovers")
        elif count > 1:
            errors.append(f"{p.name} (#{p.number}) appears {count} times")

    expected_tail = participants[len(participants) - expected_left:] if expected_left else []
    if [id(p) for p in result.not_assigned] != [id(p) for p in expected_tail]:
        errors.append(
            f"Not assigned should be the last {expected_left} participants "
            f"in list order"
        )

    for team in result.teams:
        if not any(config.can_host(p) is HostingCapability.TRUE for p in team.members):
            warnings.append(f"Team {team.number} has no member with enough seats to host")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_verification_report(result: dict) -> str:
    """Format verification results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("TEAM VERIFICATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (every participant placed exactly once)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} errors)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Build teams and verify that they partition the participant list",
    )
    parser.add_argument(
        "participants", nargs="?", default="participants.csv",
        help="Path to participant CSV file (default: participants.csv)"
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to config YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed (default: seed from config, else random)"
    )
    args = parser.parse_args()

    for p in (args.participants, args.config):
        if not Path(p).exists():
            print(f"Error: {p} not found")
            sys.exit(1)

    try:
        config = load_config(args.config)
        participants = load_participants(args.participants)
        seed = args.seed if args.seed is not None else config["seed"]
        result = build_teams(participants, config["assignment"], rng=random.Random(seed))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    report = verify_assignment(result, participants, config["assignment"])
    print(format_verification_report(report))
    sys.exit(0 if report["valid"] else 1)


if __name__ == "__main__":
    main()
