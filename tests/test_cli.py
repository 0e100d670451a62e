"""
Tests for the command-line entry point and JSON loader
"""

import json

import pytest

from ductsizer.__main__ import main
from ductsizer.services.error_types import InputValidationError
from ductsizer.services.system_loader import parse_system_payload

PAYLOAD = {
    "system": {"name": "RTU-2", "system_type": "supply", "total_cfm": 1000, "safety_factor": 0.1},
    "sections": [
        {"id": "s1", "name": "Drop", "width_in": 12, "height_in": 12, "cfm": 1000, "length_ft": 20},
    ],
}


@pytest.fixture
def system_file(tmp_path):
    path = tmp_path / "system.json"
    path.write_text(json.dumps(PAYLOAD))
    return path


class TestLoader:

    def test_parses_system_and_sections(self):
        system, sections = parse_system_payload(PAYLOAD)
        assert system.name == "RTU-2"
        assert [s.id for s in sections] == ["s1"]

    def test_sections_optional(self):
        _, sections = parse_system_payload({"system": {}})
        assert sections == []

    def test_missing_system_key(self):
        with pytest.raises(InputValidationError):
            parse_system_payload({"sections": []})

    def test_validation_errors_are_wrapped(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_system_payload({"system": {}, "sections": [{"cfm": -5}]})
        assert exc_info.value.details["errors"]


class TestCli:

    def test_summary_output(self, system_file, capsys):
        assert main([str(system_file)]) == 0
        out = capsys.readouterr().out
        assert "=== DUCT SYSTEM: RTU-2 ===" in out
        assert "Drop" in out

    def test_json_output(self, system_file, capsys):
        assert main([str(system_file), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["totalSystemLoss"] == pytest.approx(data["subtotalLoss"] * 1.1)
        assert data["sections"][0]["sectionId"] == "s1"

    def test_invalid_input_exits_nonzero(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"system": {"safety_factor": 3}}))
        assert main([str(path)]) == 1

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main([str(path)]) == 1

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / "missing.json")]) == 1
