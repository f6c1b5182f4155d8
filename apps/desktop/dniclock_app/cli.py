"""CLI entrypoints for the D'ni clock window, frame export, and settings."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import time
from pathlib import Path

from dniclock_core import ClockFace, FaceLayout, line_height, load_config, local_now, window_width
from dniclock_core.config import config_path
from dniclock_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from dniclock_renderer import glyph_sheet, save_png


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _parse_time(value: str) -> time:
    try:
        parts = [int(p) for p in value.split(":")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected HH:MM or HH:MM:SS, got {value!r}") from None
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError(f"expected HH:MM or HH:MM:SS, got {value!r}")
    try:
        return time(*parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _face(args: argparse.Namespace) -> ClockFace:
    cfg = load_config(Path(args.config) if args.config else None)
    if args.numeral_font:
        cfg.fonts.numeral_path = args.numeral_font
    if args.ascii_font:
        cfg.fonts.ascii_path = args.ascii_font
    if getattr(args, "no_seconds", False):
        cfg.clock.show_seconds = False
    return ClockFace.from_config(cfg)


def cmd_run(args: argparse.Namespace) -> int:
    from .app import run_gui

    return run_gui(config=Path(args.config) if args.config else None)


def cmd_render(args: argparse.Namespace) -> int:
    face = _face(args)
    frame = face.poll(args.time if args.time is not None else local_now())
    shown = face.shown_time
    out = save_png(frame, Path(args.out).expanduser())
    get_logger().info(f"frame written to {out}", extra={"event": "frame_exported", "time": shown})
    _print_json({"out": str(out), "time": shown.isoformat(), "width": frame.width, "height": frame.height})
    return 0


def cmd_glyphs(args: argparse.Namespace) -> int:
    face = _face(args)
    sheet = glyph_sheet(face.glyphs)
    out = save_png(sheet, Path(args.out).expanduser())
    _print_json({"out": str(out), "scale": face.glyphs.scale, "width": sheet.width, "height": sheet.height})
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = Path(args.config) if args.config else config_path()
    if args.config_cmd == "path":
        print(str(path))
        return 0
    cfg = load_config(path)
    payload = asdict(cfg)
    payload["derived"] = {
        "window_width": window_width(cfg),
        "line_height": line_height(cfg),
        "layout": asdict(FaceLayout.from_config(cfg)),
    }
    _print_json(payload)
    return 0


def _add_font_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--numeral-font", default=None, help="Path to the D'ni numeral TrueType font")
    cmd.add_argument("--ascii-font", default=None, help="Path to the font used for the colon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dniclock", description="D'ni numeral desktop clock and tools")
    parser.add_argument("--config", default=None, help="Settings file (defaults to the per-user location)")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Open the clock window")
    run_cmd.set_defaults(func=cmd_run)

    render_cmd = sub.add_parser("render", help="Render one clock frame to PNG")
    render_cmd.add_argument("--time", type=_parse_time, default=None, help="HH:MM or HH:MM:SS (defaults to now)")
    render_cmd.add_argument("--no-seconds", action="store_true", help="Show hours and minutes only")
    render_cmd.add_argument("--out", required=True, help="Output PNG path")
    _add_font_args(render_cmd)
    render_cmd.set_defaults(func=cmd_render)

    glyphs_cmd = sub.add_parser("glyphs", help="Render every cached glyph to a PNG sheet")
    glyphs_cmd.add_argument("--out", required=True, help="Output PNG path")
    _add_font_args(glyphs_cmd)
    glyphs_cmd.set_defaults(func=cmd_glyphs)

    config_cmd = sub.add_parser("config", help="Inspect settings")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    config_sub.add_parser("show", help="Print effective settings as JSON")
    config_sub.add_parser("path", help="Print the settings file location")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config) if args.config else None)
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    install_crash_hooks()
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
