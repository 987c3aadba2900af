"""Read participant lists from CSV files.

Expected header: number,name,seats,email,mobile
Only ``name`` is required. A blank ``seats`` cell means the participant did
not say how many seats they have.
"""

import csv
from pathlib import Path

from rdteams.models import Participant, UNDEFINED_SEATS


def parse_seats(value: str | None) -> int:
    """Parse a seat count cell. Blank means undefined."""
    if value is None or not value.strip():
        return UNDEFINED_SEATS
    s = value.strip()
    if not s.isdigit():
        raise ValueError(f"Cannot parse seat count: {s!r}")
    return int(s)


def load_participants(csv_path: str | Path) -> list[Participant]:
    """Parse a participant CSV into Participants, keeping file order."""
    participants = []
    seen_numbers: set[int] = set()

    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "name" not in reader.fieldnames:
            raise ValueError(f"{csv_path}: missing 'name' column")

        # Row 1 is the header
        for row_num, row in enumerate(reader, start=2):
            values = {k: (v or "").strip() for k, v in row.items() if k}
            if not any(values.values()):
                continue

            name = values.get("name", "")
            if not name:
                raise ValueError(f"Row {row_num}: name must not be empty")

            number_str = values.get("number", "")
            if number_str:
                if not number_str.isdigit():
                    raise ValueError(
                        f"Row {row_num}: cannot parse participant number {number_str!r}"
                    )
                number = int(number_str)
            else:
                number = len(participants) + 1
            if number in seen_numbers:
                raise ValueError(f"Row {row_num}: duplicate participant number {number}")
            seen_numbers.add(number)

            try:
                seats = parse_seats(values.get("seats"))
            except ValueError as e:
                raise ValueError(f"Row {row_num}: {e}") from e

            participants.append(Participant(
                number=number,
                name=name,
                num_seats=seats,
                email=values.get("email", ""),
                mobile_number=values.get("mobile", ""),
            ))

    return participants
