"""Tests for configuration file loading."""

import logging

import pytest
from src.core.cell import CellState
from src.core.configuration import (
    CONFIGURATIONS_DIR, list_configurations, load_configuration_file,
    load_named_configuration, resolve_configuration_path,
)
from src.core.errors import ConfigurationParseError


class TestBundledConfigurations:
    """Test the configurations shipped in src/configurations."""

    def test_directory_exists(self):
        """Bundled configuration directory is present."""
        assert CONFIGURATIONS_DIR.is_dir()

    def test_list(self):
        """All bundled patterns are listed, sorted."""
        names = list_configurations()
        assert names == sorted(names)
        for name in ["blinker", "block", "glider", "r_pentomino", "toad"]:
            assert name in names

    def test_block_is_ready(self):
        """Named loading returns an active, steppable world."""
        world = load_named_configuration("block")
        assert world.live_count() == 4
        assert world.bounds() == (1, 1, 2, 2)
        assert world.step() == 4

    def test_blinker(self):
        """Bundled blinker turns vertical."""
        world = load_named_configuration("blinker")
        world.step()
        assert world.bounds() == (1, 2, 3, 2)

    def test_toad_period_2(self):
        """Bundled toad oscillates with period 2."""
        world = load_named_configuration("toad")
        initial = dict(world.live_cells())

        world.step()
        assert dict(world.live_cells()) != initial
        world.step()
        assert dict(world.live_cells()) == initial

    def test_glider_moves(self):
        """Bundled glider moves one cell diagonally per 4 generations."""
        world = load_named_configuration("glider")
        start = world.get_center_of_mass()
        world.step_multiple(8)
        end = world.get_center_of_mass()
        assert end == pytest.approx((start[0] + 2, start[1] + 2))

    def test_r_pentomino(self):
        """R-pentomino loads as five COLOR_A cells."""
        world = load_named_configuration("r_pentomino")
        assert world.count_by_state() == {CellState.COLOR_A: 5, CellState.COLOR_B: 0}

    def test_unknown_name(self):
        """Unknown names raise FileNotFoundError listing what exists."""
        with pytest.raises(FileNotFoundError, match="block"):
            resolve_configuration_path("no_such_pattern")


class TestConfigurationFiles:
    """Test loading from arbitrary paths."""

    def test_custom_file(self, tmp_path):
        """Files with custom markers load and are swapped in."""
        path = tmp_path / "custom.txt"
        path.write_text("-o-\n-o-\n-o-\n", encoding="utf-8")

        world = load_configuration_file(path, dead_char='-', alive_char='o')
        assert world.live_count() == 3
        assert world.get((1, 1)) is CellState.COLOR_A

    def test_parse_error(self, tmp_path):
        """Bad characters in files surface as ConfigurationParseError."""
        path = tmp_path / "bad.txt"
        path.write_text("..\n.x\n", encoding="utf-8")

        with pytest.raises(ConfigurationParseError) as exc_info:
            load_configuration_file(path)
        assert (exc_info.value.char, exc_info.value.row, exc_info.value.col) == ('x', 1, 1)

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_configuration_file(tmp_path / "missing.txt")

    def test_custom_directory(self, tmp_path):
        """Named lookup can use another directory."""
        (tmp_path / "dot.txt").write_text("*", encoding="utf-8")
        assert list_configurations(tmp_path) == ["dot"]

        world = load_named_configuration("dot", directory=tmp_path)
        assert world.live_count() == 1

    def test_missing_directory(self, tmp_path):
        """Listing a missing directory gives no names."""
        assert list_configurations(tmp_path / "nope") == []

    def test_load_is_logged(self, tmp_path, caplog):
        """Loading reports the file and live count."""
        path = tmp_path / "pair.txt"
        path.write_text("**\n", encoding="utf-8")

        with caplog.at_level(logging.INFO, logger="src.core.configuration"):
            load_configuration_file(path)
        assert "Loaded pair.txt: 2 live cells" in caplog.text
