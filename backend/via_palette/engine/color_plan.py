"""Color plan: where and how to apply a finished palette.

Deterministic placement guidance built from a Recommendation. The advisory
text is fixed; only the placements and playbook depend on the palette and
room type.
"""

from __future__ import annotations

import structlog

from via_palette.models.contracts import (
    AccentRule,
    ColorPlan,
    DoDont,
    PaintColor,
    Placement,
    Recommendation,
    RoomPlaybookEntry,
    Sheen,
)

logger = structlog.get_logger()

DEFAULT_PLAN_NAME = "Balanced, cohesive home palette"
DEFAULT_VIBE = "Warm-modern comfort"

COHESION_TIPS = [
    "Repeat trim color on doors for cohesion.",
    "Maintain consistent LRV deltas between adjacent rooms.",
]

ACCENT_RULES = [
    AccentRule(
        context="north-facing room",
        guidance="Prefer warmer undertones to balance cool light.",
    ),
    AccentRule(
        context="small room",
        guidance="Use lighter LRV on walls to expand perceived space.",
    ),
]

DO_DONT = [
    DoDont(
        do="Cut in with trim color after two wall coats.",
        dont="Don't mix sheens within the same surface.",
    ),
]

SAMPLE_SEQUENCE = [
    "Order peel-and-stick samples for the top 3 wall contenders",
    "Evaluate them in morning and evening light",
    "Commit to the final set",
]


def _place(area: str, color: PaintColor, sheen: Sheen) -> Placement:
    return Placement(area=area, color_name=color.name, hex=color.hex, sheen=sheen)


def build_placement_map(recommendation: Recommendation) -> list[Placement]:
    roles = recommendation.roles
    return [
        _place("walls", roles.anchor, "eggshell"),
        _place("trim", roles.secondary, "semi-gloss"),
        _place("ceiling", roles.secondary, "matte"),
        _place("doors", roles.accent, "satin"),
    ]


def build_room_playbook(
    recommendation: Recommendation, room_type: str | None = None
) -> list[RoomPlaybookEntry]:
    """Per-room placements; filtered to `room_type` when it matches an entry."""
    placements = build_placement_map(recommendation)
    playbook = [
        RoomPlaybookEntry(
            room_type="living",
            placements=[placements[0], placements[1]],
            notes="Feature wall optional.",
        ),
        RoomPlaybookEntry(
            room_type="kitchen",
            placements=[_place("cabinets", recommendation.roles.secondary, "satin")],
            notes="Use scrub-resistant sheen.",
        ),
    ]
    if room_type:
        wanted = room_type.strip().lower()
        matching = [entry for entry in playbook if entry.room_type in wanted]
        if matching:
            return matching
    return playbook


def build_color_plan(
    recommendation: Recommendation,
    room_type: str | None = None,
    vibe: str | None = None,
) -> ColorPlan:
    plan = ColorPlan(
        name=vibe or DEFAULT_PLAN_NAME,
        vibe=vibe or DEFAULT_VIBE,
        brand=recommendation.brand,
        placement_map=build_placement_map(recommendation),
        cohesion_tips=list(COHESION_TIPS),
        accent_rules=list(ACCENT_RULES),
        do_dont=list(DO_DONT),
        sample_sequence=list(SAMPLE_SEQUENCE),
        room_playbook=build_room_playbook(recommendation, room_type),
    )
    logger.info(
        "color_plan_built",
        brand=plan.brand,
        room_type=room_type,
        playbook_rooms=[entry.room_type for entry in plan.room_playbook],
    )
    return plan
