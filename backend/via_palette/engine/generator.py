"""Palette generator: interview answers plus brand catalogs to a recommendation.

Answers -> seed and target; target -> per-role candidate sets; candidates and
seed -> one color per role; everything -> rationale and rule trace. The whole
pipeline is deterministic and holds no state between calls, so it is safe to
call concurrently.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from via_palette.engine.candidates import avoid_terms, build_candidate_sets
from via_palette.engine.catalog import Catalogs, freeze_catalogs, load_catalogs
from via_palette.engine.errors import PaletteError
from via_palette.engine.rationale import build_rationale, build_rule_trace
from via_palette.engine.seed import hash_seed
from via_palette.engine.selection import pick_accent, pick_anchor, pick_secondary
from via_palette.engine.targets import resolve_target
from via_palette.models.contracts import Answers, Recommendation, RoleAssignments

logger = structlog.get_logger()


def _as_catalogs(catalogs: Mapping[str, Any] | None) -> Catalogs:
    if catalogs is None:
        return load_catalogs()
    return freeze_catalogs(catalogs)


def generate_palette(
    answers: Answers | Mapping[str, Any],
    catalogs: Mapping[str, Any] | None = None,
) -> Recommendation:
    """Recommend an anchor/secondary/accent palette for one interview.

    `answers` may be a plain mapping with camelCase keys; it is validated
    into Answers first (pydantic.ValidationError on bad input). `catalogs`
    defaults to the packaged brand catalogs.

    Raises ConfigurationError, NoCandidatesError or EmptySelectionError;
    there is no fallback brand and no default color.
    """
    if not isinstance(answers, Answers):
        answers = Answers.model_validate(answers)

    seed = hash_seed(answers)
    target = resolve_target(answers)

    with structlog.contextvars.bound_contextvars(palette_seed=seed, brand=target.brand):
        try:
            candidate_sets = build_candidate_sets(
                _as_catalogs(catalogs), target, avoid_terms(answers)
            )
            anchor = pick_anchor(candidate_sets["anchor"], seed)
            secondary = pick_secondary(candidate_sets["secondary"])
            accent = pick_accent(candidate_sets["accent"], anchor)
        except PaletteError as exc:
            logger.warning(
                "palette_generation_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        recommendation = Recommendation(
            brand=target.brand,
            roles=RoleAssignments(anchor=anchor, secondary=secondary, accent=accent),
            rationale=build_rationale(target, answers),
            seed=seed,
            rule_trace=build_rule_trace(target),
        )
        logger.info(
            "palette_generated",
            room_type=answers.room_type,
            anchor=anchor.name,
            secondary=secondary.name,
            accent=accent.name,
            candidate_counts={role: len(c) for role, c in candidate_sets.items()},
        )
    return recommendation
