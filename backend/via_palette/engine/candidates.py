"""Candidate filter: narrow a brand catalog to the colors each role may use.

Each role has a tag gate, an LRV gate and the shared exclusion gate; the anchor
additionally has to match the undertone bias. Filtering preserves catalog
order and never touches the catalog itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from via_palette.config import settings
from via_palette.engine.catalog import Catalogs
from via_palette.engine.errors import ConfigurationError, NoCandidatesError
from via_palette.models.contracts import (
    ROLES,
    Answers,
    ColorTag,
    LrvBand,
    PaintColor,
    Role,
    Target,
    UndertoneBias,
)

logger = structlog.get_logger()

ROLE_TAGS: dict[Role, frozenset[ColorTag]] = {
    "anchor": frozenset({"wall"}),
    "secondary": frozenset({"trim", "cabinet"}),
    "accent": frozenset({"accent", "door", "island"}),
}

# Undertones accepted in addition to an exact match with the bias.
BIAS_COMPANIONS: dict[str, frozenset[str]] = {
    "warm": frozenset({"green-gray"}),
}


def matches_role_tags(color: PaintColor, role: Role) -> bool:
    """Untagged entries (tags=None) fit every role."""
    if color.tags is None:
        return True
    return not color.tags.isdisjoint(ROLE_TAGS[role])


def fits_lrv(color: PaintColor, band: LrvBand) -> bool:
    if color.lrv is None:
        return True
    low, high = band
    return low <= color.lrv <= high


def fits_undertone(color: PaintColor, bias: UndertoneBias | None) -> bool:
    if bias is None:
        return True
    undertone = color.undertone or "neutral"
    return undertone == bias or undertone in BIAS_COMPANIONS.get(bias, frozenset())


def is_avoided(color: PaintColor, avoid: Iterable[str]) -> bool:
    haystack = f"{color.name} {color.undertone or ''}".lower()
    return any(term.lower() in haystack for term in avoid)


def avoid_terms(answers: Answers) -> list[str]:
    """Combined colors-to-avoid and hard-no terms, kept verbatim."""
    hard_nos = answers.guardrails.hard_nos if answers.guardrails else []
    return [*answers.colors_to_avoid, *hard_nos]


def filter_candidates(
    catalog: Sequence[PaintColor],
    target: Target,
    role: Role,
    avoid: Iterable[str] = (),
) -> list[PaintColor]:
    """Return the catalog entries that pass every gate for `role`, in catalog order."""
    terms = list(avoid)
    band = target.band_for(role)
    return [
        color
        for color in catalog
        if matches_role_tags(color, role)
        and fits_lrv(color, band)
        and (role != "anchor" or fits_undertone(color, target.undertone_bias))
        and not is_avoided(color, terms)
    ]


def brand_catalog(catalogs: Catalogs, brand: str) -> Sequence[PaintColor]:
    """Look up the brand's catalog, refusing one that is missing or too small."""
    catalog = catalogs.get(brand) or ()
    if len(catalog) < settings.min_catalog_size:
        logger.warning(
            "catalog_too_small",
            brand=brand,
            size=len(catalog),
            minimum=settings.min_catalog_size,
        )
        raise ConfigurationError(brand, len(catalog), settings.min_catalog_size)
    return catalog


def build_candidate_sets(
    catalogs: Catalogs,
    target: Target,
    avoid: Iterable[str] = (),
) -> dict[Role, list[PaintColor]]:
    """Filter the target brand's catalog for all three roles.

    Raises ConfigurationError for a missing/undersized catalog and
    NoCandidatesError for the first role (anchor, secondary, accent) left empty.
    """
    catalog = brand_catalog(catalogs, target.brand)
    terms = list(avoid)

    candidate_sets: dict[Role, list[PaintColor]] = {}
    for role in ROLES:
        candidates = filter_candidates(catalog, target, role, terms)
        if not candidates:
            logger.warning(
                "no_candidates",
                role=role,
                brand=target.brand,
                band=list(target.band_for(role)),
                undertone_bias=target.undertone_bias,
                avoid_count=len(terms),
            )
            raise NoCandidatesError(role, target.brand)
        candidate_sets[role] = candidates

    logger.debug(
        "candidate_sets_built",
        brand=target.brand,
        sizes={role: len(colors) for role, colors in candidate_sets.items()},
    )
    return candidate_sets
