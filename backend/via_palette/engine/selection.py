"""Role selector: exactly one color per role from its candidate list.

The anchor is a seeded pick (first 8 hex chars of the seed, modulo the list
length). Secondary and accent are ranked, with the earliest candidate winning
ties. Lists are read, never reordered in place.
"""

from __future__ import annotations

from collections.abc import Sequence

from via_palette.engine.errors import EmptySelectionError
from via_palette.models.contracts import PaintColor, Role

SEED_PREFIX_LEN = 8
MISSING_LRV_SECONDARY = 0.0
MISSING_LRV_ACCENT = 50.0


def seed_index(seed: str, size: int) -> int:
    """Reduce a hex seed to an index in [0, size)."""
    return int(seed[:SEED_PREFIX_LEN], 16) % size


def pick_anchor(candidates: Sequence[PaintColor], seed: str) -> PaintColor:
    if not candidates:
        raise EmptySelectionError("anchor")
    return candidates[seed_index(seed, len(candidates))]


def pick_secondary(candidates: Sequence[PaintColor]) -> PaintColor:
    """Brightest candidate; unknown LRV ranks as 0."""
    if not candidates:
        raise EmptySelectionError("secondary")
    # max() keeps the first of equal keys
    return max(
        candidates,
        key=lambda c: c.lrv if c.lrv is not None else MISSING_LRV_SECONDARY,
    )


def pick_accent(candidates: Sequence[PaintColor], anchor: PaintColor) -> PaintColor:
    """Candidate whose LRV sits farthest from the anchor's; unknown LRV counts as 50."""
    if not candidates:
        raise EmptySelectionError("accent")
    anchor_lrv = anchor.lrv if anchor.lrv is not None else MISSING_LRV_ACCENT
    return max(
        candidates,
        key=lambda c: abs((c.lrv if c.lrv is not None else MISSING_LRV_ACCENT) - anchor_lrv),
    )


def select_role(
    candidates: Sequence[PaintColor],
    role: Role,
    seed: str,
    anchor: PaintColor | None = None,
) -> PaintColor:
    """Dispatch to the selector for `role`. Accent needs the chosen anchor."""
    if role == "anchor":
        return pick_anchor(candidates, seed)
    if role == "secondary":
        return pick_secondary(candidates)
    if anchor is None:
        raise ValueError("Accent selection requires the chosen anchor")
    return pick_accent(candidates, anchor)
