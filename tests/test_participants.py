"""Tests for participants.py - reading participant CSV files."""

from pathlib import Path

import pytest

from rdteams.models import UNDEFINED_SEATS
from rdteams.participants import load_participants, parse_seats

ROOT = Path(__file__).resolve().parent.parent


def _write(tmp_path, text):
    path = tmp_path / "participants.csv"
    path.write_text(text)
    return path


class TestParseSeats:
    def test_number(self):
        assert parse_seats("6") == 6
        assert parse_seats(" 12 ") == 12

    def test_zero(self):
        assert parse_seats("0") == 0

    def test_blank(self):
        assert parse_seats("") == UNDEFINED_SEATS
        assert parse_seats("   ") == UNDEFINED_SEATS
        assert parse_seats(None) == UNDEFINED_SEATS

    def test_negative(self):
        with pytest.raises(ValueError):
            parse_seats("-2")

    def test_text(self):
        with pytest.raises(ValueError):
            parse_seats("many")


class TestLoadParticipants:
    def test_loads_sample_file(self):
        participants = load_participants(ROOT / "participants.csv")
        assert len(participants) == 13

        first = participants[0]
        assert first.number == 1
        assert first.name == "Clemens Stich"
        assert first.num_seats == 4
        assert first.email == "c.s@mail.de"
        assert first.mobile_number == "0176 22"

        assert participants[3].name == "Biene Maja"
        assert participants[3].num_seats == 1000
        assert participants[5].num_seats == UNDEFINED_SEATS

    def test_name_only(self, tmp_path):
        path = _write(tmp_path, "name\nAnna\nBen\n")
        participants = load_participants(path)
        assert [p.number for p in participants] == [1, 2]
        assert all(p.num_seats == UNDEFINED_SEATS for p in participants)

    def test_skips_blank_rows(self, tmp_path):
        path = _write(tmp_path, "name,seats\nAnna,4\n,\nBen,\n")
        participants = load_participants(path)
        assert [p.name for p in participants] == ["Anna", "Ben"]

    def test_missing_name_column(self, tmp_path):
        path = _write(tmp_path, "number,seats\n1,4\n")
        with pytest.raises(ValueError, match="name"):
            load_participants(path)

    def test_empty_name(self, tmp_path):
        path = _write(tmp_path, "name,seats\nAnna,4\n,6\n")
        with pytest.raises(ValueError, match="Row 3"):
            load_participants(path)

    def test_bad_seats_reports_row(self, tmp_path):
        path = _write(tmp_path, "name,seats\nAnna,4\nBen,lots\n")
        with pytest.raises(ValueError, match="Row 3"):
            load_participants(path)

    def test_duplicate_number(self, tmp_path):
        path = _write(tmp_path, "number,name\n1,Anna\n2,Ben\n1,Cleo\n")
        with pytest.raises(ValueError, match="Row 4: duplicate participant number 1"):
            load_participants(path)

    def test_row_order_number_clashes_with_explicit(self, tmp_path):
        path = _write(tmp_path, "number,name\n,Anna\n1,Ben\n")
        with pytest.raises(ValueError, match="Row 3: duplicate"):
            load_participants(path)

    def test_bad_number(self, tmp_path):
        path = _write(tmp_path, "number,name\nx1,Anna\n")
        with pytest.raises(ValueError, match="Row 2"):
            load_participants(path)
