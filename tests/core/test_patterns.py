"""Tests for patterns and the pattern library."""

import json

import pytest

from toruslife.core.cell import Cell
from toruslife.core.grid import Universe
from toruslife.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        pattern = Pattern("Test", [(0, 0), (1, 1)], "A test", {"author": "me"})
        assert pattern.name == "Test"
        assert pattern.cells == [(0, 0), (1, 1)]
        assert pattern.description == "A test"
        assert pattern.metadata == {"author": "me"}

    def test_default_metadata(self):
        """Metadata defaults to an empty dict."""
        assert Pattern("Empty", []).metadata == {}

    def test_apply_to_universe(self):
        """Applying clears the universe and places the cells at an offset."""
        universe = Universe(6, 6)
        universe.set_cell(5, 5, True)

        Pattern("Pair", [(0, 0), (0, 1)]).apply_to_universe(universe, 2, 3)

        assert universe.population == 2
        assert universe.get_cell(2, 3) is Cell.ALIVE
        assert universe.get_cell(2, 4) is Cell.ALIVE
        assert universe.get_cell(5, 5) is Cell.DEAD

    def test_apply_wraps_around(self):
        """Cells past the edge wrap to the opposite side."""
        universe = Universe(4, 4)
        Pattern("Pair", [(0, 0), (0, 1)]).apply_to_universe(universe, 3, 3)

        assert universe.get_cell(3, 3) is Cell.ALIVE
        assert universe.get_cell(3, 0) is Cell.ALIVE

    def test_as_seed(self):
        """A pattern seed builds the same universe as applying the pattern."""
        pattern = Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
        seeded = Universe(10, 8, pattern.as_seed(10, 8, 6, 8))

        applied = Universe(10, 8)
        pattern.apply_to_universe(applied, 6, 8)

        assert seeded == applied
        assert seeded.population == 5

    def test_bounding_box_and_size(self):
        """Bounding box is (min_row, min_col, max_row, max_col); size is (width, height)."""
        pattern = Pattern("Shape", [(1, 2), (3, 2), (2, 6)])
        assert pattern.get_bounding_box() == (1, 2, 3, 6)
        assert pattern.get_size() == (5, 3)

    def test_empty_pattern_bounds(self):
        """An empty pattern has a degenerate bounding box."""
        pattern = Pattern("Empty", [])
        assert pattern.get_bounding_box() == (0, 0, 0, 0)
        assert pattern.get_size() == (1, 1)

    def test_normalize(self):
        """Normalizing shifts the pattern to the origin."""
        pattern = Pattern("Shifted", [(5, 7), (6, 8)], "desc", {"k": 1})
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 1)]
        assert normalized.description == "desc"
        assert normalized.metadata == {"k": 1}
        assert pattern.cells == [(5, 7), (6, 8)]

    def test_dict_round_trip(self):
        """to_dict output is accepted by from_dict."""
        pattern = Pattern("Pair", [(0, 0), (0, 1)], "Two cells")
        data = pattern.to_dict()
        assert data["cells"] == [[0, 0], [0, 1]]

        restored = Pattern.from_dict(data)
        assert restored.name == "Pair"
        assert restored.cells == [(0, 0), (0, 1)]
        assert restored.description == "Two cells"

    def test_from_dict_invalid(self):
        """Malformed dictionaries are rejected."""
        with pytest.raises(KeyError):
            Pattern.from_dict({"cells": []})

        with pytest.raises(ValueError):
            Pattern.from_dict({"name": "Bad", "cells": [[1, 2, 3]]})

    def test_from_text(self):
        """Pictures become (row, col) cells."""
        pattern = Pattern.from_text("Glider", ".#.\n..#\n###")
        assert pattern.cells == [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]

    def test_from_universe(self):
        """Capturing a universe records its live cells."""
        universe = Universe(4, 3, "■□□□\n□□□■\n□□□□")
        pattern = Pattern.from_universe(universe, "Captured")

        assert pattern.cells == [(0, 0), (1, 3)]
        assert pattern.metadata["source_size"] == (4, 3)
        assert pattern.metadata["population"] == 2
        assert pattern.metadata["generation"] == 0


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """The library starts with the classic patterns."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Beehive", "Loaf", "Blinker", "Toad", "Beacon", "Glider"]:
            assert name in names

    def test_get_pattern_ignores_case(self):
        """Lookups are case-insensitive."""
        library = PatternLibrary()
        assert library.get_pattern("glider") is library.get_pattern("Glider")
        assert library.get_pattern("r-PENTOMINO") is not None
        assert library.get_pattern("Missing") is None

    def test_categories(self):
        """Built-ins are grouped and custom patterns listed separately."""
        library = PatternLibrary()
        categories = library.get_patterns_by_category()

        assert "Block" in categories["Still Life"]
        assert "Blinker" in categories["Oscillators"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories

        library.add_pattern(Pattern("Mine", [(0, 0)]))
        assert library.get_patterns_by_category()["Custom"] == ["Mine"]

    @pytest.mark.parametrize("name", ["Block", "Beehive", "Loaf"])
    def test_still_lifes_are_stable(self, name):
        """Still lifes do not change under tick."""
        pattern = PatternLibrary().get_pattern(name)
        universe = Universe(10, 10, pattern.as_seed(10, 10, 3, 3))

        before = universe.render()
        universe.tick()
        assert universe.render() == before

    @pytest.mark.parametrize("name", ["Blinker", "Toad", "Beacon"])
    def test_oscillators_have_period_two(self, name):
        """Period-2 oscillators change once and return after two ticks."""
        pattern = PatternLibrary().get_pattern(name)
        universe = Universe(10, 10, pattern.as_seed(10, 10, 3, 3))

        before = universe.render()
        universe.tick()
        assert universe.render() != before
        universe.tick()
        assert universe.render() == before

    @pytest.mark.parametrize("name", ["Glider", "Lightweight Spaceship"])
    def test_spaceships_keep_population(self, name):
        """Spaceships keep their population after a full period."""
        pattern = PatternLibrary().get_pattern(name)
        universe = Universe(20, 20, pattern.as_seed(20, 20, 5, 5))

        for _ in range(4):
            universe.tick()
        assert universe.population == len(pattern.cells)

    def test_save_and_load_pattern(self, tmp_path):
        """Patterns round trip through JSON files."""
        library = PatternLibrary()
        path = tmp_path / "pair.json"
        library.save_pattern(Pattern("Pair", [(0, 0), (0, 1)], "Two cells"), path)

        other = PatternLibrary()
        loaded = other.load_pattern(path)

        assert loaded.name == "Pair"
        assert loaded.cells == [(0, 0), (0, 1)]
        assert other.get_pattern("Pair") is loaded

    def test_load_invalid_pattern(self, tmp_path):
        """Files missing required fields raise ValueError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"cells": [[0, 0]]}))

        with pytest.raises(ValueError):
            PatternLibrary().load_pattern(path)

    def test_load_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PatternLibrary().load_pattern(tmp_path / "missing.json")
