"""Tests for manual loading."""

import json
from pathlib import Path

import pytest
import yaml
from manualcheck.document import detect_format, load_document, parse_document
from manualcheck.exceptions import ManualInputError, ManualNotFoundError, ManualParseError


class TestParseDocument:
    """Tests for parse_document."""

    def test_json(self) -> None:
        assert parse_document('{"version": "1", "tools": []}') == {"version": "1", "tools": []}

    def test_yaml(self) -> None:
        text = "version: '1'\ntools:\n  - name: a\n"
        assert parse_document(text, "yaml") == {"version": "1", "tools": [{"name": "a"}]}

    def test_malformed_json(self) -> None:
        with pytest.raises(ManualParseError) as exc_info:
            parse_document('{"version": }')
        assert "line 1" in str(exc_info.value)

    def test_malformed_yaml(self) -> None:
        with pytest.raises(ManualParseError):
            parse_document("tools: [a, b", "yaml")

    def test_yaml_date_rejected(self) -> None:
        with pytest.raises(ManualParseError):
            parse_document("version: 2024-01-01\n", "yaml")

    def test_yaml_integer_key_rejected(self) -> None:
        with pytest.raises(ManualParseError):
            parse_document("1: one\n", "yaml")

    def test_malformed_is_not_a_report(self) -> None:
        with pytest.raises(ManualInputError):
            parse_document("not json")


class TestLoadDocument:
    """Tests for load_document."""

    def test_load_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "manual.json"
        path.write_text(json.dumps({"version": "1"}), encoding="utf-8")
        assert load_document(path) == {"version": "1"}

    def test_load_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "manual.yml"
        path.write_text(yaml.safe_dump({"version": "1", "tools": []}), encoding="utf-8")
        assert load_document(path) == {"version": "1", "tools": []}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManualNotFoundError) as exc_info:
            load_document(tmp_path / "absent.json")
        assert exc_info.value.path == tmp_path / "absent.json"

    def test_directory_is_not_a_manual(self, tmp_path: Path) -> None:
        with pytest.raises(ManualNotFoundError):
            load_document(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "manual.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(ManualParseError):
            load_document(path)

    def test_bundled_manual_loads(self) -> None:
        path = Path(__file__).parents[2] / "manuals" / "manual.json"
        document = load_document(path)
        names = [t["name"] for t in document["tools"]]
        assert names == ["read_document", "search", "suggest", "eval"]


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("m.json", "json"), ("m.yaml", "yaml"), ("m.YML", "yaml"), ("manual", "json")],
    )
    def test_suffixes(self, name: str, fmt: str) -> None:
        assert detect_format(Path(name)) == fmt
