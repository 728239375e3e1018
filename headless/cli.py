"""
Headless CLI - Inspect and replay widgets from the command line.

Usage:
    headless widgets                              List widget types
    headless inspect <widget> [--set k=v ...]     Print a fresh widget's projection
    headless replay <script.json>                 Run a scripted interaction sequence

Replay script format:
    {
        "widget": "toggle",
        "initial": {"is_checked": false},
        "steps": [
            {"action": "toggle"},
            {"action": "set_disabled", "args": [true]},
            {"action": "undo"}
        ]
    }
"""

import argparse
import json
import logging
import sys

from pydantic import BaseModel, ValidationError

from .config import EngineConfig, configure_logging
from .engine_core.state import snapshot_to_dict

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Headless - Interactive state engine for UI widgets",
        prog="headless",
    )
    parser.add_argument("--log-level", help="Logging level (default: HEADLESS_LOG_LEVEL or WARNING)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("widgets", help="List widget types")

    inspect_parser = subparsers.add_parser("inspect", help="Print a widget's state and CSS projection")
    inspect_parser.add_argument("widget", help="Widget type")
    inspect_parser.add_argument(
        "--set", dest="fields", action="append", default=[], metavar="FIELD=VALUE",
        help="Initial state override (value parsed as JSON when possible)",
    )

    replay_parser = subparsers.add_parser("replay", help="Replay a JSON interaction script")
    replay_parser.add_argument("script", help="Path to script file")

    args = parser.parse_args(argv)

    try:
        config = EngineConfig.from_env()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")
    configure_logging(args.log_level or config.log_level)

    if args.command == "widgets":
        cmd_widgets(args)
    elif args.command == "inspect":
        cmd_inspect(args, config)
    elif args.command == "replay":
        cmd_replay(args, config)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_widgets(args):
    """List registered widget types."""
    from .widgets import WIDGETS

    for name, widget_class in WIDGETS.items():
        print(f"{name:<12} {widget_class.__name__}")


def cmd_inspect(args, config):
    """Build a widget and print its projection."""
    initial = {}
    for item in args.fields:
        key, sep, raw = item.partition("=")
        if not sep:
            _fail(f"Expected FIELD=VALUE, got: {item}")
        initial[key] = _parse_value(raw)

    widget = _create_widget(args.widget, initial, config)
    _print_json(describe(widget))


def cmd_replay(args, config):
    """Run every step of a script and print one JSON line per step."""
    try:
        with open(args.script, "r", encoding="utf-8") as f:
            script = json.load(f)
    except FileNotFoundError:
        _fail(f"File not found: {args.script}")
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON in {args.script}: {e}")

    if not isinstance(script, dict) or "widget" not in script:
        _fail("Script must be an object with a 'widget' key")

    widget = _create_widget(script["widget"], script.get("initial") or {}, config)
    steps = script.get("steps") or []
    logger.info("Replaying %d step(s) on %s", len(steps), type(widget).__name__)

    for index, step in enumerate(steps):
        action = step.get("action", "")
        method = getattr(widget, action, None)
        if action.startswith("_") or not callable(method):
            _fail(f"Step {index}: unknown action {action!r} for {script['widget']}")

        result = method(*step.get("args", []), **step.get("kwargs", {}))
        _print_json({
            "step": index,
            "action": action,
            "result": _to_plain(result),
            "visual_state": widget.visual_state_name,
        })

    _print_json(describe(widget))


def describe(widget):
    """JSON-ready summary of a widget."""
    return {
        "widget": widget.get_widget_type(),
        "visual_state": widget.visual_state_name,
        "state": snapshot_to_dict(widget.get_state()),
        "css": _to_plain(widget.get_css_state()),
        "history": _to_plain(widget.get_history()),
    }


def _create_widget(name, initial, config):
    from .widgets import WIDGETS

    widget_class = WIDGETS.get(name)
    if widget_class is None:
        _fail(f"Unknown widget: {name} (choose from {', '.join(WIDGETS)})")
    return widget_class(config=config, **initial)


def _parse_value(raw):
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _to_plain(value):
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    return value


def _print_json(data):
    print(json.dumps(data, default=str))


def _fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
