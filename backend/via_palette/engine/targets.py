"""Target resolver: qualitative interview answers to quantitative constraints.

Pure functions, no I/O. Every number here comes from a literal table, so the
bands are ordered (low <= high) by construction.
"""

from __future__ import annotations

from via_palette.models.contracts import (
    Answers,
    Brand,
    Contrast,
    DaytimeBrightness,
    LrvBand,
    Target,
    UndertoneBias,
)

BASE_ANCHOR_LRV: dict[DaytimeBrightness, LrvBand] = {
    "veryBright": (55, 75),
    "kindaBright": (63, 80),
    "dim": (70, 88),
}

# Warm bulbs cast yellow, so walls go a touch brighter; cold white bulbs the reverse.
BULB_SHIFT: dict[str, int] = {
    "cozyYellow_2700K": 2,
    "neutral_3000_3500K": 0,
    "brightWhite_4000KPlus": -2,
}

CRISP_SECONDARY_LRV: LrvBand = (85, 96)
MEDIUM_SECONDARY_LRV: LrvBand = (80, 95)
SOFT_SECONDARY_CEILING = 95
SOFT_SECONDARY_OFFSET = 5

BOLD_ACCENT_LRV: LrvBand = (3, 18)
GENTLE_ACCENT_LRV: LrvBand = (18, 35)

FEEL_BIAS: dict[str, UndertoneBias | None] = {
    "warmer": "warm",
    "cooler": "cool",
    "inBetween": None,
}

FLOOR_BIAS: dict[str, UndertoneBias] = {
    "yellowGoldWood": "warm",
    "redBrownWood": "warm",
    "grayBrown": "cool",
}


def pick_brand(answers: Answers) -> Brand:
    """Honor an explicit brand; for pickForMe, lean on the warm/cool feel."""
    if answers.brand_preference != "pickForMe":
        return answers.brand_preference
    feel = answers.color_comfort.warm_cool_feel if answers.color_comfort else None
    if feel == "warmer":
        return "BenjaminMoore"
    if feel == "cooler":
        return "SherwinWilliams"
    return "Behr"


def anchor_band(answers: Answers) -> LrvBand:
    low, high = BASE_ANCHOR_LRV[answers.daytime_brightness]
    shift = BULB_SHIFT[answers.bulb_color]
    return (low + shift, high + shift)


def secondary_band(contrast: Contrast, anchor: LrvBand) -> LrvBand:
    if contrast == "crisp":
        return CRISP_SECONDARY_LRV
    if contrast == "verySoft":
        return (anchor[1] - SOFT_SECONDARY_OFFSET, SOFT_SECONDARY_CEILING)
    return MEDIUM_SECONDARY_LRV


def wants_bold_accent(answers: Answers) -> bool:
    vibe = answers.color_comfort.overall_vibe if answers.color_comfort else None
    return answers.bold_darker_spot == "loveIt" or vibe == "confidentColorMoments"


def undertone_bias(answers: Answers) -> UndertoneBias | None:
    """Stated warm/cool feel, overridden by a strongly tinted floor."""
    feel = answers.color_comfort.warm_cool_feel if answers.color_comfort else None
    bias = FEEL_BIAS.get(feel) if feel else None

    floor = answers.existing_elements.floor_look if answers.existing_elements else None
    if floor in FLOOR_BIAS:
        bias = FLOOR_BIAS[floor]
    return bias


def resolve_target(answers: Answers) -> Target:
    """Resolve brand, the three LRV bands, undertone bias and contrast."""
    contrast: Contrast = (
        answers.color_comfort.contrast_level
        if answers.color_comfort and answers.color_comfort.contrast_level
        else "medium"
    )
    anchor = anchor_band(answers)
    return Target(
        brand=pick_brand(answers),
        anchor_lrv=anchor,
        secondary_lrv=secondary_band(contrast, anchor),
        accent_lrv=BOLD_ACCENT_LRV if wants_bold_accent(answers) else GENTLE_ACCENT_LRV,
        undertone_bias=undertone_bias(answers),
        contrast=contrast,
    )
