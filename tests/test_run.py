"""Tests for the command-line runner."""

import json
from pathlib import Path

import pandas as pd

from mentormatch.run import main, run_matching

ROOT = Path(__file__).resolve().parent.parent
CONFIG = str(ROOT / "configs" / "config.yaml")
MENTEE = str(ROOT / "data" / "sample_mentee.json")
MENTORS = str(ROOT / "data" / "sample_mentors.json")


def test_run_matching_writes_outputs(tmp_path):
    result = run_matching(CONFIG, MENTEE, MENTORS, max_results=2, output_dir=str(tmp_path))

    assert result["n_mentors"] == 4
    assert Path(result["outputs"]["report"]).exists()
    assert result["n_matches"] <= 2

    with open(tmp_path / "matches.json") as f:
        matches = json.load(f)
    assert matches["mentee_id"] == "mentee-001"
    assert len(matches["matches"]) == result["n_matches"]
    assert matches["matches"][0]["mentor"]["id"] == "mentor-101"
    assert "recommended_mentor_types" in matches["mentee_analysis"]

    frame = pd.read_csv(tmp_path / "matches.csv")
    assert len(frame) == result["n_matches"]

    with open(tmp_path / "matching_report.json") as f:
        report = json.load(f)
    assert report["n_mentors"] == 4
    assert "sensitivity" in report


def test_main_success(tmp_path):
    code = main([
        "--config", CONFIG,
        "--mentee", MENTEE,
        "--mentors", MENTORS,
        "--output-dir", str(tmp_path),
    ])
    assert code == 0
    assert (tmp_path / "matches.json").exists()


def test_main_failure_returns_one(tmp_path):
    code = main([
        "--config", CONFIG,
        "--mentee", str(tmp_path / "missing.json"),
        "--mentors", MENTORS,
        "--output-dir", str(tmp_path),
    ])
    assert code == 1
