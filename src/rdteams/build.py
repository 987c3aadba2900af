#!/usr/bin/env python3
"""Running Dinner Team Builder.

    rdteams [participants.csv] [config.yaml] [--seed N]

Reads the participant list and event config, builds teams, and prints the
teams, hosting balance statistics and a verification report.
Exit code 0 if the teams are valid, 1 on any error.

Examples:
    rdteams                                  # default files, random seed
    rdteams spring.csv --seed 42             # reproducible teams
    rdteams spring.csv custom.yaml --seed 7  # alternate config file
"""

import argparse
import random
import sys
from pathlib import Path

from rdteams.config import load_config
from rdteams.output import format_teams
from rdteams.participants import load_participants
from rdteams.stats import compute_stats, format_stats_report
from rdteams.teams import InfeasibleConfiguration, build_teams
from rdteams.verify import format_verification_report, verify_assignment


def main():
    parser = argparse.ArgumentParser(
        description="Running Dinner Team Builder",
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
        help="Random seed for reproducible teams. Overrides the seed in the "
             "config. Use rdteams-scan to find a seed where every team can host."
    )
    args = parser.parse_args()

    for p in (args.participants, args.config):
        if not Path(p).exists():
            print(f"Error: {p} not found")
            sys.exit(1)

    print(f"Loading config from {args.config}...")
    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"Loading participants from {args.participants}...")
    try:
        participants = load_participants(args.participants)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Loaded {len(participants)} participants")

    assignment = config["assignment"]
    seed = args.seed if args.seed is not None else config["seed"]

    print(f"Building teams (seed={seed})...")
    try:
        result = build_teams(participants, assignment, rng=random.Random(seed))
    except InfeasibleConfiguration as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("\n" + format_teams(result, assignment, event_name=config["event"]["name"]))

    stats = compute_stats(result, assignment)
    print("\n" + format_stats_report(stats))

    report = verify_assignment(result, participants, assignment)
    print("\n" + format_verification_report(report))

    if not report["valid"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
