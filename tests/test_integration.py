"""Integration test - sample files through the command line tools."""

import random
import sys
from pathlib import Path

import pytest

from rdteams import build, scan, verify
from rdteams.config import load_config
from rdteams.participants import load_participants
from rdteams.scan import scan_seed
from rdteams.stats import compute_stats
from rdteams.teams import build_teams
from rdteams.verify import verify_assignment

ROOT = Path(__file__).resolve().parent.parent
CONFIG = str(ROOT / "config.yaml")
PARTICIPANTS = str(ROOT / "participants.csv")


def _run(monkeypatch, module, *args):
    monkeypatch.setattr(sys, "argv", [module.__name__, *args])
    module.main()


class TestEndToEnd:
    def test_build_and_verify(self):
        config = load_config(CONFIG)
        participants = load_participants(PARTICIPANTS)
        result = build_teams(participants, config["assignment"], rng=random.Random(42))

        # 13 participants in pairs: 6 teams, the last one left over
        assert len(result.teams) == 6
        assert [p.name for p in result.not_assigned] == ["Emma Richter"]

        report = verify_assignment(result, participants, config["assignment"])
        assert report["valid"], report["errors"]

    def test_stats_cover_everyone_assigned(self):
        config = load_config(CONFIG)
        participants = load_participants(PARTICIPANTS)
        result = build_teams(participants, config["assignment"], rng=random.Random(1))
        stats = compute_stats(result, config["assignment"])
        assert sum(stats["totals"].values()) == 12

    def test_scan_seed(self):
        config = load_config(CONFIG)
        participants = load_participants(PARTICIPANTS)
        info = scan_seed(participants, config["assignment"], 3)
        assert info["seed"] == 3
        assert info["teams"] == 6
        assert info["ok"] == (info["teams_without_host"] == [])

    def test_scan_seed_reproducible(self):
        config = load_config(CONFIG)
        participants = load_participants(PARTICIPANTS)
        a = scan_seed(participants, config["assignment"], 8)
        b = scan_seed(participants, config["assignment"], 8)
        assert a == b


class TestCommandLine:
    def test_build(self, monkeypatch, capsys):
        _run(monkeypatch, build, PARTICIPANTS, CONFIG, "--seed", "42")
        out = capsys.readouterr().out
        assert "Loaded 13 participants" in out
        assert "Building teams (seed=42)" in out
        assert "--- TEAM 6 ---" in out
        assert "NOT ASSIGNED (1)" in out
        assert "RESULT: VALID" in out

    def test_build_missing_file(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, build, str(tmp_path / "nope.csv"), CONFIG)
        assert exc.value.code == 1
        assert "not found" in capsys.readouterr().out

    def test_build_infeasible(self, monkeypatch, capsys, tmp_path):
        cfg = tmp_path / "big.yaml"
        cfg.write_text("teams:\n  size: 20\n")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, build, PARTICIPANTS, str(cfg))
        assert exc.value.code == 1
        assert "more participants than a team's size" in capsys.readouterr().out

    def test_build_bad_config_section(self, monkeypatch, capsys, tmp_path):
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("teams: 2\n")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, build, PARTICIPANTS, str(cfg))
        assert exc.value.code == 1
        assert "Error: teams must be a mapping" in capsys.readouterr().out

    def test_build_bad_csv(self, monkeypatch, capsys, tmp_path):
        csv_path = tmp_path / "bad.csv"
        csv_path.write_text("name,seats\nAnna,lots\n")
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, build, str(csv_path), CONFIG)
        assert exc.value.code == 1
        assert "Row 2" in capsys.readouterr().out

    def test_verify(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc:
            _run(monkeypatch, verify, PARTICIPANTS, CONFIG, "--seed", "5")
        assert exc.value.code == 0
        assert "TEAM VERIFICATION REPORT" in capsys.readouterr().out

    def test_scan(self, monkeypatch, capsys):
        with pytest.raises(SystemExit):
            _run(monkeypatch, scan, PARTICIPANTS, CONFIG, "-n", "5")
        out = capsys.readouterr().out
        assert "Scanning seeds 0..4 for 13 participants" in out
        assert out.count("OK") + out.count("FAIL") >= 5
