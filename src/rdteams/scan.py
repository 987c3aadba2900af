#!/usr/bin/env python3
"""Scan seeds to find team builds where every team has a confirmed host.

Usage: rdteams-scan [participants.csv] [config.yaml] [-n MAX_SEED]
"""

import argparse
import random
import sys
from pathlib import Path

from rdteams.config import load_config
from rdteams.models import AssignmentConfig, Participant
from rdteams.participants import load_participants
from rdteams.stats import compute_stats
from rdteams.teams import build_teams


def scan_seed(participants: list[Participant], config: AssignmentConfig,
              seed: int) -> dict:
    """Run a single seed and return summary info."""
    result = build_teams(participants, config, rng=random.Random(seed))
    stats = compute_stats(result, config)

    return {
        "seed": seed,
        "ok": not stats["teams_without_host"],
        "teams": len(result.teams),
        "teams_without_host": stats["teams_without_host"],
        "host_spread": stats["host_spread"],
    }


def main():
    parser = argparse.ArgumentParser(
        description="Scan seeds to find team builds where every team "
                    "has a member with enough seats to host",
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
        "-n", "--max-seed", type=int, default=100,
        help="Maximum seed to try (default: 100, scans 0..N-1)"
    )
    args = parser.parse_args()

    for p in (args.participants, args.config):
        if not Path(p).exists():
            print(f"Error: {p} not found")
            sys.exit(1)

    try:
        config = load_config(args.config)
        participants = load_participants(args.participants)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    assignment = config["assignment"]
    max_seed = args.max_seed

    print(f"Scanning seeds 0..{max_seed - 1} for {len(participants)} participants...")
    print(f"{'Seed':>6}  {'Teams':>5}  {'NoHost':>6}  {'Spread':>6}  Result")
    print("-" * 42)

    good_seeds = []
    for seed in range(max_seed):
        try:
            result = scan_seed(participants, assignment, seed)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)
        status = "OK" if result["ok"] else "FAIL"
        print(f"{seed:>6}  {result['teams']:>5}  {len(result['teams_without_host']):>6}  "
              f"{result['host_spread']:>6}  {status}", flush=True)
        if result["ok"]:
            good_seeds.append(seed)

    print("-" * 42)
    if good_seeds:
        print(f"\nGood seeds ({len(good_seeds)}/{max_seed}): "
              f"{', '.join(str(s) for s in good_seeds)}")
    else:
        print(f"\nNo good seeds found in 0..{max_seed - 1}")

    sys.exit(0 if good_seeds else 1)


if __name__ == "__main__":
    main()
