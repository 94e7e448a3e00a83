"""Human-readable rationale and machine-readable rule trace. Formatting only."""

from __future__ import annotations

from via_palette.models.contracts import Answers, LrvBand, Rationale, Target

NO_FLOOR_RATIONALE = "No strong floor undertone."


def _num(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_band(band: LrvBand) -> str:
    return f"{_num(band[0])}-{_num(band[1])}"


def build_rationale(target: Target, answers: Answers) -> Rationale:
    floor = answers.existing_elements.floor_look if answers.existing_elements else None
    floors = (
        f"Floors {floor} -> undertone bias {target.undertone_bias or 'neutral'}."
        if floor
        else NO_FLOOR_RATIONALE
    )
    return Rationale(
        lighting=(
            f"Daylight {answers.daytime_brightness} -> anchor LRV in "
            f"{format_band(target.anchor_lrv)}."
        ),
        mood=f"Mood {', '.join(answers.mood_words)}; contrast {target.contrast}.",
        floors=floors,
    )


def build_rule_trace(target: Target) -> list[str]:
    """Six entries, always in this order."""
    return [
        f"brand={target.brand}",
        f"anchorLRV={format_band(target.anchor_lrv)}",
        f"secondaryLRV={format_band(target.secondary_lrv)}",
        f"accentLRV={format_band(target.accent_lrv)}",
        f"undertoneBias={target.undertone_bias or 'none'}",
        f"contrast={target.contrast}",
    ]
