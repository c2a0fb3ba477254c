"""Horizontal header ('hhea') and horizontal metrics ('hmtx') tables."""

from dataclasses import dataclass
from typing import BinaryIO

from pixelfont.domain import Glyph
from pixelfont.io.packing import i16, u16, u32
from pixelfont.tables.base import FontTable


@dataclass(frozen=True, slots=True)
class HorizontalMetric:
    advance_width: int
    left_side_bearing: int


class Hmtx(FontTable):
    """Advance width and left side bearing of every glyph."""

    tag = b"hmtx"

    def __init__(self, metrics: list[HorizontalMetric]) -> None:
        if not metrics:
            raise ValueError("hmtx needs at least one glyph")
        self.metrics = metrics

    @classmethod
    def monospace(cls, advance_width: int, glyphs: list[Glyph]) -> "Hmtx":
        """Same advance for every glyph; side bearings from the glyph bounds."""
        return cls([HorizontalMetric(advance_width, glyph.rect.x_min) for glyph in glyphs])

    @property
    def number_of_h_metrics(self) -> int:
        """Count of full metric records.

        Glyphs after the last change of advance width reuse the final advance
        and only store their side bearing.
        """
        last = self.metrics[-1].advance_width
        for index in range(len(self.metrics) - 1, -1, -1):
            if self.metrics[index].advance_width != last:
                return index + 2
        return 1

    def write(self, writer: BinaryIO) -> None:
        split = self.number_of_h_metrics
        for metric in self.metrics[:split]:
            writer.write(u16(metric.advance_width))
            writer.write(i16(metric.left_side_bearing))
        for metric in self.metrics[split:]:
            writer.write(i16(metric.left_side_bearing))


class Hhea(FontTable):
    """Horizontal layout header, derived from the glyphs and their metrics."""

    tag = b"hhea"

    def __init__(
        self,
        ascender: int,
        descender: int,
        line_gap: int,
        glyphs: list[Glyph],
        hmtx: Hmtx,
    ) -> None:
        self.ascender = ascender
        self.descender = descender
        self.line_gap = line_gap
        self.number_of_h_metrics = hmtx.number_of_h_metrics
        self.advance_width_max = max(m.advance_width for m in hmtx.metrics)

        # Extremes only count glyphs that have outlines
        inked = [(g, m) for g, m in zip(glyphs, hmtx.metrics) if not g.is_empty()]
        self.min_left_side_bearing = min((m.left_side_bearing for _, m in inked), default=0)
        self.min_right_side_bearing = min(
            (m.advance_width - m.left_side_bearing - g.rect.width for g, m in inked),
            default=0,
        )
        self.x_max_extent = max((m.left_side_bearing + g.rect.width for g, m in inked), default=0)

    def write(self, writer: BinaryIO) -> None:
        writer.write(u32(0x00010000))  # version
        writer.write(i16(self.ascender))
        writer.write(i16(self.descender))
        writer.write(i16(self.line_gap))
        writer.write(u16(self.advance_width_max))
        writer.write(i16(self.min_left_side_bearing))
        writer.write(i16(self.min_right_side_bearing))
        writer.write(i16(self.x_max_extent))
        writer.write(i16(1))  # caretSlopeRise
        writer.write(i16(0))  # caretSlopeRun
        writer.write(i16(0))  # caretOffset
        writer.write(b"\0" * 8)  # reserved
        writer.write(i16(0))  # metricDataFormat
        writer.write(u16(self.number_of_h_metrics))
