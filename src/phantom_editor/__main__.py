"""Command-line entry point: ``phantom [path]``."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from phantom_editor import __version__
from phantom_editor.runtime import telemetry


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="phantom", description="Modal text editor for the terminal."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="File to open, or a directory to pick a file from",
    )
    parser.add_argument(
        "--log-preset",
        choices=tuple(telemetry.PRESETS),
        help="Telemetry preset (logs go to a file, never the screen)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    from phantom_editor.adapters.textual.app import PhantomApp
    from phantom_editor.editor import Editor

    editor = Editor.from_settings()
    telemetry.record_event("editor.start", data={"path": args.path or ""})
    PhantomApp(editor, path=args.path).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
