"""
Tests for the command-line interface.
"""

import json

import pytest

from ..cli import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from installing handlers on the test root logger."""
    monkeypatch.setattr("headless.cli.configure_logging", lambda level: None)


def json_lines(output):
    return [json.loads(line) for line in output.strip().splitlines()]


def write_script(tmp_path, script):
    path = tmp_path / "script.json"
    path.write_text(json.dumps(script))
    return str(path)


class TestWidgets:
    """Tests for 'headless widgets'."""

    def test_lists_every_widget(self, capsys):
        """Each registered widget is printed with its class."""
        main(["widgets"])

        out = capsys.readouterr().out
        assert "toggle" in out
        assert "HeadlessAccordion" in out
        assert len(out.strip().splitlines()) == 8


class TestInspect:
    """Tests for 'headless inspect'."""

    def test_fresh_widget(self, capsys):
        """A fresh widget reports idle with an empty history."""
        main(["inspect", "button"])

        (summary,) = json_lines(capsys.readouterr().out)
        assert summary["widget"] == "button"
        assert summary["visual_state"] == "idle"
        assert summary["css"]["classes"] == ["headless-component", "idle", "button"]
        assert summary["history"]["currentPosition"] == -1

    def test_field_overrides(self, capsys):
        """--set values are parsed as JSON where possible."""
        main(["inspect", "slider", "--set", "value=30", "--set", "is_focused=true"])

        (summary,) = json_lines(capsys.readouterr().out)
        assert summary["state"]["value"] == 30
        assert summary["visual_state"] == "focused"
        assert summary["css"]["dataAttributes"]["aria-valuenow"] == "30"

    def test_plain_string_value(self, capsys):
        """Values that are not JSON stay strings."""
        main(["inspect", "tabs", "--set", "active_tab=settings"])

        (summary,) = json_lines(capsys.readouterr().out)
        assert summary["state"]["active_tab"] == "settings"

    def test_unknown_widget(self, capsys):
        """Unknown widget names exit with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main(["inspect", "spinner"])

        assert excinfo.value.code == 1
        assert "Unknown widget" in capsys.readouterr().err

    def test_malformed_override(self, capsys):
        """Overrides need FIELD=VALUE."""
        with pytest.raises(SystemExit):
            main(["inspect", "toggle", "--set", "is_checked"])

        assert "FIELD=VALUE" in capsys.readouterr().err


class TestReplay:
    """Tests for 'headless replay'."""

    def test_replay_script(self, tmp_path, capsys):
        """Each step prints a line, then the final summary."""
        path = write_script(tmp_path, {
            "widget": "toggle",
            "steps": [
                {"action": "toggle"},
                {"action": "set_disabled", "args": [True]},
                {"action": "toggle"},
                {"action": "undo"},
                {"action": "undo"},
            ],
        })

        main(["replay", path])

        lines = json_lines(capsys.readouterr().out)
        assert [line.get("action") for line in lines[:5]] == [
            "toggle", "set_disabled", "toggle", "undo", "undo",
        ]
        assert lines[0]["result"] == {"prevented": False, "handled": True}
        assert lines[1]["visual_state"] == "disabled"
        assert lines[2]["result"] == {"prevented": True, "reason": "disabled or loading"}

        summary = lines[-1]
        assert summary["state"]["is_checked"] is False
        assert summary["history"] == {
            "length": 2, "currentPosition": -1, "canUndo": False, "canRedo": True,
        }

    def test_initial_state(self, tmp_path, capsys):
        """The script's initial block seeds the widget."""
        path = write_script(tmp_path, {
            "widget": "accordion",
            "initial": {"type": "multiple"},
            "steps": [
                {"action": "toggle_item", "args": ["a"]},
                {"action": "toggle_item", "kwargs": {"item_id": "b"}},
            ],
        })

        main(["replay", path])

        summary = json_lines(capsys.readouterr().out)[-1]
        assert summary["state"]["open_items"] == ["a", "b"]
        assert summary["state"]["type"] == "multiple"

    @pytest.mark.parametrize("action", ["explode", "_apply_snapshot", "widget_type"])
    def test_rejects_unknown_actions(self, tmp_path, capsys, action):
        """Unknown, private and non-callable actions fail."""
        path = write_script(tmp_path, {"widget": "button", "steps": [{"action": action}]})

        with pytest.raises(SystemExit):
            main(["replay", path])

        assert "unknown action" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """A missing script exits with status 1."""
        with pytest.raises(SystemExit) as excinfo:
            main(["replay", str(tmp_path / "nope.json")])

        assert excinfo.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        """Broken JSON is reported."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(SystemExit):
            main(["replay", str(path)])

        assert "Invalid JSON" in capsys.readouterr().err


class TestConfigErrors:
    """Tests for configuration problems at startup."""

    def test_invalid_environment(self, monkeypatch, capsys):
        """A bad HEADLESS_* variable stops the CLI."""
        monkeypatch.setenv("HEADLESS_HISTORY_LIMIT", "0")

        with pytest.raises(SystemExit):
            main(["widgets"])

        assert "Invalid configuration" in capsys.readouterr().err

    def test_no_command(self, capsys):
        """Without a subcommand the help is printed and the exit code is 1."""
        with pytest.raises(SystemExit) as excinfo:
            main([])

        assert excinfo.value.code == 1
