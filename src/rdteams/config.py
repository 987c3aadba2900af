"""Config loading and validation for the running dinner team builder."""

from pathlib import Path

import yaml

from rdteams.models import AssignmentConfig


DEFAULT_COURSES = ["Appetizer", "Main Course", "Dessert"]
DEFAULT_TEAM_SIZE = 2


def parse_courses(value) -> list[str]:
    """Parse the courses entry: a list of course names or a course count.

    A count of 3 becomes ['Course 1', 'Course 2', 'Course 3'].
    """
    if isinstance(value, bool):
        raise ValueError(f"courses must be a list of names or a count, got {value!r}")
    if isinstance(value, int):
        if value < 1:
            raise ValueError(f"courses must be at least 1, got {value}")
        return [f"Course {i}" for i in range(1, value + 1)]
    if isinstance(value, list):
        names = [str(c).strip() for c in value]
        if not names:
            raise ValueError("courses must not be empty")
        if any(not n for n in names):
            raise ValueError("course names must not be blank")
        return names
    raise ValueError(f"courses must be a list of names or a count, got {value!r}")


def _parse_int(value, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def _section(raw: dict, key: str) -> dict:
    section = raw.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"{key} must be a mapping, got {section!r}")
    return section


def load_config(path: str | Path) -> dict:
    """Load and validate config YAML, returning structured data.

    Returns dict with:
    - event: {name, courses}
    - assignment: AssignmentConfig
    - seed: int or None (default seed for the command line tools)
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    # Event
    event_raw = _section(raw, "event")
    courses = parse_courses(event_raw.get("courses", list(DEFAULT_COURSES)))
    event = {
        "name": str(event_raw.get("name", "")),
        "courses": courses,
    }

    # Teams
    teams_raw = _section(raw, "teams")
    team_size = _parse_int(teams_raw.get("size", DEFAULT_TEAM_SIZE), "teams.size")
    if team_size < 1:
        raise ValueError(f"teams.size must be at least 1, got {team_size}")
    strict = teams_raw.get("strict_capacity_balancing", True)
    if not isinstance(strict, bool):
        raise ValueError(
            f"teams.strict_capacity_balancing must be true or false, got {strict!r}"
        )

    assignment = AssignmentConfig(
        team_size=team_size,
        course_count=len(courses),
        strict_capacity_balancing=strict,
    )

    seed = raw.get("seed")
    if seed is not None:
        seed = _parse_int(seed, "seed")

    return {
        "event": event,
        "assignment": assignment,
        "seed": seed,
    }
