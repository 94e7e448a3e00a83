"""Tests for rationale prose and the rule trace."""

from conftest import make_answers
from via_palette.engine.rationale import (
    NO_FLOOR_RATIONALE,
    build_rationale,
    build_rule_trace,
    format_band,
)
from via_palette.engine.targets import resolve_target
from via_palette.models.contracts import Target


class TestFormatBand:
    """Tests for format_band."""

    def test_integral_values_drop_decimal(self) -> None:
        """Whole-number bounds render without '.0'."""
        assert format_band((72.0, 90.0)) == "72-90"

    def test_fractional_values_kept(self) -> None:
        """Fractional bounds keep their decimals."""
        assert format_band((62.5, 80)) == "62.5-80"


class TestBuildRationale:
    """Tests for build_rationale."""

    def test_lighting_mentions_brightness_and_band(self) -> None:
        """Lighting names the daylight level and the anchor band."""
        answers = make_answers(daytimeBrightness="dim", bulbColor="cozyYellow_2700K")
        rationale = build_rationale(resolve_target(answers), answers)
        assert rationale.lighting == "Daylight dim -> anchor LRV in 72-90."

    def test_mood_lists_words_and_contrast(self) -> None:
        """Mood joins the mood words and names the contrast."""
        answers = make_answers(
            moodWords=["cozy", "grounded"], colorComfort={"contrastLevel": "crisp"}
        )
        rationale = build_rationale(resolve_target(answers), answers)
        assert rationale.mood == "Mood cozy, grounded; contrast crisp."

    def test_floors_with_floor_look(self) -> None:
        """Floors names the floor look and the resulting bias."""
        answers = make_answers(existingElements={"floorLook": "redBrownWood"})
        rationale = build_rationale(resolve_target(answers), answers)
        assert rationale.floors == "Floors redBrownWood -> undertone bias warm."

    def test_floors_without_bias_reads_neutral(self) -> None:
        """An unset bias reads as neutral in the floors line."""
        answers = make_answers(existingElements={"floorLook": "tileOrStone"})
        rationale = build_rationale(resolve_target(answers), answers)
        assert rationale.floors == "Floors tileOrStone -> undertone bias neutral."

    def test_no_floor_look(self) -> None:
        """Without a floor look the floors line is the fixed fallback."""
        answers = make_answers(existingElements={})
        assert build_rationale(resolve_target(answers), answers).floors == NO_FLOOR_RATIONALE
        answers = make_answers()
        assert build_rationale(resolve_target(answers), answers).floors == NO_FLOOR_RATIONALE


class TestBuildRuleTrace:
    """Tests for build_rule_trace."""

    def test_fixed_order_and_format(self) -> None:
        """The trace has six key=value entries in a fixed order."""
        target = Target(
            brand="BenjaminMoore",
            anchor_lrv=(65, 82),
            secondary_lrv=(77, 95),
            accent_lrv=(3, 18),
            undertone_bias="warm",
            contrast="verySoft",
        )
        assert build_rule_trace(target) == [
            "brand=BenjaminMoore",
            "anchorLRV=65-82",
            "secondaryLRV=77-95",
            "accentLRV=3-18",
            "undertoneBias=warm",
            "contrast=verySoft",
        ]

    def test_unset_bias_reads_none(self) -> None:
        """An unset bias reads as none in the trace."""
        target = resolve_target(make_answers())
        assert build_rule_trace(target)[4] == "undertoneBias=none"
