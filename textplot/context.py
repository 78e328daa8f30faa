from __future__ import annotations

from dataclasses import dataclass, field
import logging


LOGGER = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """Per-render notice state.

    One context lives for one render call; the warnings it logs are emitted at
    most once per condition for that call.
    """

    overlap: bool = False
    downsampled: bool = False
    degenerate: list[str] = field(default_factory=list)

    def note_overlap(self, what: str = "categories") -> None:
        if self.overlap:
            return
        self.overlap = True
        LOGGER.warning("overlapping %s: some cells only show the last one drawn", what)

    def note_downsampled(self, points: int, columns: int) -> None:
        if self.downsampled:
            return
        self.downsampled = True
        LOGGER.warning("%d points drawn on %d columns; values are averaged per column", points, columns)

    def note_degenerate(self, reason: str) -> None:
        if reason in self.degenerate:
            return
        self.degenerate.append(reason)
        LOGGER.debug("degenerate scale (%s); using midpoint placement", reason)
