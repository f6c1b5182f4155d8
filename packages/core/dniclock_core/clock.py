"""Clock face layout and change-driven frame composition."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, time

from dniclock_renderer import BACKGROUND, FontSource, GlyphCache, GridBuffer, LineCompositor, PillowFont

from .config import AppConfig, window_width

logger = logging.getLogger("dniclock.clock")


@dataclass(frozen=True)
class FaceLayout:
    width: int = 300
    height: int = 70
    margin: int = 10
    show_seconds: bool = True

    @property
    def line_height(self) -> int:
        return self.height - 2 * self.margin

    @classmethod
    def from_config(cls, cfg: AppConfig) -> FaceLayout:
        return cls(
            width=window_width(cfg),
            height=cfg.window.height,
            margin=cfg.window.margin,
            show_seconds=cfg.clock.show_seconds,
        )


def truncate(now: datetime | time, show_seconds: bool = True) -> time:
    """Drop the fields the face does not display."""
    if isinstance(now, datetime):
        now = now.time()
    if show_seconds:
        return now.replace(microsecond=0, tzinfo=None)
    return now.replace(second=0, microsecond=0, tzinfo=None)


def local_now() -> datetime:
    return datetime.now().astimezone()


class ClockFace:
    """Turns wall-clock times into frames, recomposing only when the shown time changes."""

    def __init__(self, glyphs: GlyphCache, layout: FaceLayout | None = None) -> None:
        self.glyphs = glyphs
        self.layout = layout or FaceLayout()
        self._shown: time | None = None
        self.frame: GridBuffer | None = None

    @classmethod
    def from_fonts(cls, numeral_font: FontSource, ascii_font: FontSource, layout: FaceLayout) -> ClockFace:
        return cls(GlyphCache.build(float(layout.line_height), numeral_font, ascii_font), layout)

    @classmethod
    def from_config(cls, cfg: AppConfig) -> ClockFace:
        if not cfg.fonts.numeral_path:
            raise ValueError("fonts.numeral_path is not configured")
        return cls.from_fonts(
            PillowFont.from_path(cfg.fonts.numeral_path),
            PillowFont.ascii_default(cfg.fonts.ascii_path),
            FaceLayout.from_config(cfg),
        )

    @property
    def shown_time(self) -> time | None:
        return self._shown

    def compose(self, value: time) -> GridBuffer:
        """Draw ``H:MM`` or ``H:MM:SS`` in D'ni numerals on a fresh frame."""
        layout = self.layout
        line = LineCompositor(
            GridBuffer.create(BACKGROUND, layout.width, layout.height),
            x=layout.margin,
            y=layout.margin,
            line_height=layout.line_height,
        )
        line.write_glyph(self.glyphs.get_single_digit(value.hour))
        line.write_glyph(self.glyphs.get_colon())
        line.write_glyph(self.glyphs.get_two_digit(value.minute))
        if layout.show_seconds:
            line.write_glyph(self.glyphs.get_colon())
            line.write_glyph(self.glyphs.get_two_digit(value.second))

        logger.debug(f"frame composed for {value.isoformat()}", extra={"event": "frame_composed", "time": value})
        return line.buf

    def poll(self, now: datetime | time) -> GridBuffer | None:
        """Return a new frame if the displayed time changed since the last poll."""
        shown = truncate(now, self.layout.show_seconds)
        if shown == self._shown:
            return None
        self.frame = self.compose(shown)
        self._shown = shown
        return self.frame
