"""
Tests for Config.
"""

from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from trackdf import Config, DEFAULT_CONFIG


class TestConfig:
    """Test configuration defaults and JSON round trip."""

    def test_default_values(self):
        assert DEFAULT_CONFIG.default_projection == "+proj=longlat"
        assert DEFAULT_CONFIG.canonical_table_kind == "pandas"
        assert DEFAULT_CONFIG.error_ok_code == "OK"
        assert DEFAULT_CONFIG.error_separator == "+"

    def test_save_and_load(self, tmp_path):
        config = Config(default_projection="EPSG:4326", error_separator=";")
        path = tmp_path / "nested" / "config.json"

        config.save(path)
        loaded = Config.from_json(path)

        assert loaded == config
        assert loaded.to_dict()["error_separator"] == ";"
