"""
Tests for the trackdf command line interface.
"""

import pytest
import pandas as pd
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trackdf import Config
from trackdf.cli import main


@pytest.fixture
def tracks_csv(tmp_path):
    path = tmp_path / "tracks.csv"
    pd.DataFrame({
        "id": ["A", "A", "B"],
        "time": ["2020-06-01 10:00", "2020-06-01 10:05", "2020-06-01 10:00"],
        "x": [-120.00, -120.01, -119.90],
        "y": [34.25, 34.26, 34.20],
    }).to_csv(path, index=False)
    return path


class TestSummary:
    """Test `trackdf summary`."""

    def test_default_projection_flag(self, tracks_csv, capsys):
        assert main(["summary", str(tracks_csv), "--proj"]) == 0

        out = capsys.readouterr().out
        assert "Track table [3 observations]" in out
        assert "Number of tracks:  2" in out
        assert "Geographic:  True" in out
        assert "+proj=longlat" in out

    def test_unprojected(self, tracks_csv, capsys):
        assert main(["summary", str(tracks_csv)]) == 0
        assert "Geographic:  False" in capsys.readouterr().out

    def test_config_file(self, tracks_csv, tmp_path, capsys):
        config_path = tmp_path / "config.json"
        Config(default_projection="EPSG:4326").save(config_path)

        assert main(["--config", str(config_path), "summary", str(tracks_csv), "--proj"]) == 0
        assert "EPSG:4326" in capsys.readouterr().out


class TestProject:
    """Test `trackdf project`."""

    def test_writes_reprojected_csv(self, tracks_csv, tmp_path):
        output = tmp_path / "out" / "utm.csv"

        code = main([
            "project", str(tracks_csv),
            "--from", "+proj=longlat +datum=WGS84",
            "--to", "EPSG:32610",
            "-o", str(output),
        ])

        assert code == 0
        result = pd.read_csv(output)
        assert list(result.columns) == ["id", "time", "x", "y"]
        assert (result["x"] > 100_000).all()
        assert (result["y"] > 3_000_000).all()

    def test_invalid_projection(self, tracks_csv, tmp_path):
        code = main([
            "project", str(tracks_csv),
            "--to", "+proj=nonsense",
            "-o", str(tmp_path / "out.csv"),
        ])
        assert code == 1

    def test_missing_file(self, tmp_path):
        code = main([
            "project", str(tmp_path / "nope.csv"),
            "--to", "EPSG:32610",
            "-o", str(tmp_path / "out.csv"),
        ])
        assert code == 1
