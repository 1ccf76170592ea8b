"""Tests for scripts/export_curriculum.py."""

import importlib.util
import json
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_curriculum.py"


def load_script():
    spec = importlib.util.spec_from_file_location("export_curriculum", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestExportCurriculum:
    """JSON export for content authors."""

    def test_writes_json(self, tmp_path):
        script = load_script()
        output = tmp_path / "out" / "cat.json"
        script.export_curriculum("Cat", None, output)
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["theme"] == "Cat"
        assert data["units"][0]["lessons"][0]["levels"][1]["words"] == ["Big", "cat"]

    def test_main_logs_at_configured_level(self, tmp_path, monkeypatch):
        script = load_script()
        calls = []
        monkeypatch.setattr(script.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("ECHOPATH_LOG_LEVEL", "warning")
        output = tmp_path / "dog.json"
        monkeypatch.setattr("sys.argv", ["export_curriculum.py", "--theme", "Dog", "--output", str(output)])
        script.main()
        assert calls[0]["level"] == "WARNING"
        assert output.exists()

    def test_with_templates(self, tmp_path):
        script = load_script()
        templates = SCRIPT.parents[1] / "content" / "first_words.yaml"
        text = script.export_curriculum("Owl", templates, None)
        assert json.loads(text)["units"][0]["title"] == "First Words"
