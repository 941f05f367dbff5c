"""Tests for path tracking and rendering."""

import pytest
from manualcheck.validation.path import PathTracker, render_path


class TestPathTracker:
    """Tests for PathTracker."""

    def test_starts_empty(self) -> None:
        tracker = PathTracker()
        assert tracker.current == ()
        assert len(tracker) == 0

    def test_enter_pushes_and_pops(self) -> None:
        tracker = PathTracker()
        with tracker.enter("tools"):
            with tracker.enter(0):
                assert tracker.current == ("tools", 0)
            assert tracker.current == ("tools",)
        assert tracker.current == ()

    def test_segment_removed_when_block_raises(self) -> None:
        """Siblings start from the parent path even after a failure."""
        tracker = PathTracker()
        with tracker.enter("tools"):
            with pytest.raises(RuntimeError):
                with tracker.enter(1):
                    raise RuntimeError("boom")
            assert tracker.current == ("tools",)
        assert tracker.current == ()

    def test_at_does_not_push(self) -> None:
        tracker = PathTracker()
        with tracker.enter("provider"):
            assert tracker.at("name") == ("provider", "name")
            assert tracker.current == ("provider",)


class TestRenderPath:
    """Tests for render_path."""

    def test_root(self) -> None:
        assert render_path(()) == "<root>"

    def test_fields_and_indices(self) -> None:
        path = ("tools", 1, "inputs", "properties", "count")
        assert render_path(path) == "tools[1].inputs.properties.count"

    def test_leading_index(self) -> None:
        assert render_path((0, "name")) == "[0].name"

    def test_non_identifier_key_uses_brackets(self) -> None:
        assert render_path(("properties", "partial-q")) == 'properties["partial-q"]'
        assert render_path(("properties", 'say "hi"')) == 'properties["say \\"hi\\""]'

    def test_dollar_key(self) -> None:
        assert render_path(("$schema",)) == "$schema"
