"""Tests CLI — commandes page / theme / section."""
import json

import pytest

from block_engine.__main__ import main


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)
    return _write


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_section_command(write_json, capsys):
    path = write_json("hero.json", {"heading": "Bonjour"})
    assert main(["section", "hero", path]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!-- wp:group")
    assert "Bonjour" in out


def test_section_command_layout_and_json_format(write_json, capsys):
    path = write_json("hero.json", {"heading": "Bonjour"})
    assert main(["section", "hero", path, "--layout", "fullscreen", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "core/cover"
    assert data["innerBlocks"][0]["innerContent"] == ["Bonjour"]


def test_section_command_unknown_type(write_json):
    assert main(["section", "carousel", write_json("c.json", {})]) == 2


def test_theme_command(write_json, capsys):
    assert main(["theme", write_json("theme.json", {"colors": {"primary": "#000000"}})]) == 0
    theme = json.loads(capsys.readouterr().out)
    assert theme["version"] == 3
    assert theme["settings"]["color"]["palette"][0]["color"] == "#000000"


def test_page_command_with_theme_out(write_json, tmp_path, capsys):
    manifest = write_json("site.json", {
        "title": "Test",
        "sections": [{"type": "hero", "config": {"heading": "H"}}, {"type": "gallery", "order": 1}],
    })
    theme_out = tmp_path / "out" / "theme.json"
    theme_out.parent.mkdir()
    assert main(["page", manifest, "--theme-out", str(theme_out)]) == 0
    out = capsys.readouterr().out
    assert "Gallery section coming soon" in out
    assert json.loads(theme_out.read_text(encoding="utf-8"))["version"] == 3


def test_missing_file_returns_error(tmp_path):
    assert main(["page", str(tmp_path / "absent.json")]) == 1
    assert main(["theme", str(tmp_path / "absent.json")]) == 1


def test_invalid_section_config_returns_error(write_json):
    assert main(["section", "features", write_json("f.json", {"features": "pas une liste"})]) == 1
