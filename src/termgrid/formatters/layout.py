"""Column width allocation under a total-width budget."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from termgrid.formatters.profile import ColumnProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderPlan:
    """Profiles with ``final_width`` populated, in display order."""

    columns: tuple[ColumnProfile, ...]
    target_width: int

    @property
    def widths(self) -> list[int]:
        return [c.final_width or 0 for c in self.columns]

    @property
    def total_width(self) -> int:
        """Rendered line length: column widths plus single-space separators."""
        if not self.columns:
            return 0
        return sum(self.widths) + len(self.columns) - 1

    def spans(self) -> list[tuple[int, int]]:
        """Half-open ``[start, end)`` character span of each column in a line."""
        result = []
        offset = 0
        for width in self.widths:
            result.append((offset, offset + width))
            offset += width + 1
        return result


def natural_width(profile: ColumnProfile) -> int:
    if profile.fixed_width is not None:
        return max(0, profile.fixed_width)
    return max(profile.content_max_width, len(profile.name))


def plan_layout(profiles: Sequence[ColumnProfile], target_width: int) -> RenderPlan:
    """Assign final widths, letting at most one auto-width column flex.

    Regular columns take their natural width and are never shrunk. The first
    auto-width column keeps its content width while it fits and otherwise takes
    whatever is left of ``target_width``, down to zero.
    """
    autos = [i for i, p in enumerate(profiles) if p.auto_width]
    elastic = autos[0] if autos else None
    if len(autos) > 1:
        extra = ", ".join(profiles[i].name for i in autos[1:])
        logger.warning("Only one auto-width column is supported; sizing %s naturally", extra)

    columns = [
        replace(p, final_width=None if i == elastic else natural_width(p)) for i, p in enumerate(profiles)
    ]
    base_width = sum(c.final_width or 0 for c in columns) + max(len(columns) - 1, 0)

    if elastic is not None:
        auto = columns[elastic]
        if base_width + auto.content_max_width <= target_width:
            auto.final_width = auto.content_max_width
        else:
            auto.final_width = max(0, target_width - base_width)
            logger.debug(
                "Auto column %s compressed from %d to %d", auto.name, auto.content_max_width, auto.final_width
            )
    elif base_width > target_width:
        logger.debug("Natural width %d exceeds target %d; no auto column to compress", base_width, target_width)

    plan = RenderPlan(columns=tuple(columns), target_width=target_width)
    logger.debug("Planned widths %s (total %d)", plan.widths, plan.total_width)
    return plan
