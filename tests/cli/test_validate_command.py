"""Tests for the validate and catalog CLI commands."""

import io
import json

import pytest

from a2ui.__main__ import main
from a2ui.messages import messages_to_jsonl

VALID_BATCH = [
    {
        "createSurface": {
            "surfaceId": "s1",
            "catalogId": "https://a2ui.dev/specification/0.9/standard_catalog_definition.json",
        }
    },
    {
        "updateComponents": {
            "surfaceId": "s1",
            "components": [{"id": "root", "component": "Text", "text": "Hi"}],
        }
    },
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "A2UI_STRICT",
        "A2UI_ALLOWED_COMPONENTS",
        "A2UI_PROTOCOL_VERSION",
        "A2UI_SCHEMA_DIR",
        "A2UI_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


@pytest.mark.unit
def test_valid_json_batch_exits_zero(tmp_path, capsys):
    path = _write(tmp_path, "batch.json", json.dumps(VALID_BATCH))
    assert main(["validate", path]) == 0
    assert "valid (0 errors" in capsys.readouterr().out


@pytest.mark.unit
def test_jsonl_input(tmp_path):
    path = _write(tmp_path, "batch.jsonl", messages_to_jsonl(VALID_BATCH))
    assert main(["validate", path, "--schema"]) == 0


@pytest.mark.unit
def test_invalid_message_exits_one(tmp_path, capsys):
    path = _write(tmp_path, "msg.json", json.dumps({"createSurface": {"surfaceId": "s1"}}))
    assert main(["validate", path]) == 1
    assert "MISSING_CATALOG_ID" in capsys.readouterr().out


@pytest.mark.unit
def test_json_report(tmp_path, capsys, invalid_batch):
    path = _write(tmp_path, "batch.json", json.dumps(invalid_batch))
    assert main(["validate", path, "--strict", "--json", "--workers", "4"]) == 1
    report = json.loads(capsys.readouterr().out)
    assert report["valid"] is False
    assert report["errors"]
    assert report["warnings"]
    assert all(e["path"].startswith("messages[") for e in report["errors"])


@pytest.mark.unit
def test_schema_failure_makes_invalid(tmp_path, capsys):
    legacy_tabs = [
        {
            "updateComponents": {
                "surfaceId": "s1",
                "components": [
                    {
                        "id": "root",
                        "component": "Tabs",
                        "tabItems": [{"title": "A", "child": "a"}],
                    }
                ],
            }
        }
    ]
    path = _write(tmp_path, "batch.json", json.dumps(legacy_tabs))
    assert main(["validate", path]) == 0
    capsys.readouterr()

    assert main(["validate", path, "--schema", "--json"]) == 1
    report = json.loads(capsys.readouterr().out)
    assert report["errors"] == []
    assert report["schema"]["valid"] is False


@pytest.mark.unit
def test_schema_skips_inferred_v08_messages(tmp_path, caplog):
    batch = [{"beginRendering": {"surfaceId": "s", "root": "r"}}]
    path = _write(tmp_path, "batch.json", json.dumps(batch))
    assert main(["validate", path, "--schema"]) == 0
    assert "v0.8" in caplog.text


@pytest.mark.unit
def test_schema_mixed_batch_keeps_message_index(tmp_path, capsys):
    batch = [
        {"beginRendering": {"surfaceId": "s", "root": "r"}},
        {
            "updateComponents": {
                "surfaceId": "s1",
                "components": [
                    {
                        "id": "root",
                        "component": "Tabs",
                        "tabItems": [{"title": "A", "child": "a"}],
                    }
                ],
            }
        },
    ]
    path = _write(tmp_path, "batch.json", json.dumps(batch))
    assert main(["validate", path, "--schema", "--json"]) == 1
    report = json.loads(capsys.readouterr().out)
    assert report["errors"] == []
    assert report["schema"]["errors"]
    assert all(
        e["path"].startswith("/messages/1") for e in report["schema"]["errors"]
    )


@pytest.mark.unit
def test_schema_pinned_v09_checks_every_message(tmp_path, capsys):
    batch = [{"beginRendering": {"surfaceId": "s", "root": "r"}}]
    path = _write(tmp_path, "batch.json", json.dumps(batch))
    assert main(["validate", path, "--schema", "--protocol", "0.9", "--json"]) == 1
    report = json.loads(capsys.readouterr().out)
    assert report["schema"]["valid"] is False


@pytest.mark.unit
def test_allow_list(tmp_path, capsys):
    message = {
        "updateComponents": {
            "surfaceId": "s1",
            "components": [{"id": "root", "component": "Map"}],
        }
    }
    path = _write(tmp_path, "msg.json", json.dumps(message))
    assert main(["validate", path, "--strict", "--allow", "Map", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["warnings"] == []


@pytest.mark.unit
def test_protocol_pin(tmp_path):
    message = {"beginRendering": {"surfaceId": "s1", "root": "root"}}
    path = _write(tmp_path, "msg.json", json.dumps(message))
    assert main(["validate", path, "--protocol", "0.8"]) == 0
    assert main(["validate", path, "--protocol", "0.9"]) == 1


@pytest.mark.unit
def test_unknown_protocol_exits_two(tmp_path):
    path = _write(tmp_path, "batch.json", json.dumps(VALID_BATCH))
    assert main(["validate", path, "--protocol", "2.0"]) == 2


@pytest.mark.unit
def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(messages_to_jsonl(VALID_BATCH)))
    assert main(["validate", "-"]) == 0


@pytest.mark.unit
def test_missing_file_exits_two(tmp_path):
    assert main(["validate", str(tmp_path / "absent.json")]) == 2


@pytest.mark.unit
def test_malformed_json_exits_two(tmp_path):
    path = _write(tmp_path, "bad.json", "{not json")
    assert main(["validate", path]) == 2


@pytest.mark.unit
def test_missing_schema_dir_exits_two(tmp_path, monkeypatch):
    monkeypatch.setenv("A2UI_SCHEMA_DIR", str(tmp_path / "nowhere"))
    path = _write(tmp_path, "batch.json", json.dumps(VALID_BATCH))
    assert main(["validate", path, "--schema"]) == 2


@pytest.mark.unit
def test_catalog_json(capsys):
    assert main(["catalog", "--json"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert len(summary["components"]) == 18
    assert summary["components"]["Slider"]["required"] == ["value", "min", "max"]


@pytest.mark.unit
def test_catalog_text(capsys):
    assert main(["catalog"]) == 0
    out = capsys.readouterr().out
    assert "ChoicePicker (interactive)" in out


@pytest.mark.unit
def test_no_command_prints_help(capsys):
    assert main([]) == 1
