"""Via palette contract models.

Everything the engine consumes or produces is one of these records. Enum
fields are Literal types, so an unknown value is a ValidationError at the
boundary rather than a silently dropped constraint. Interview payloads arrive
with camelCase keys; attributes are snake_case.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

# === Enumerations ===

Brand = Literal["SherwinWilliams", "BenjaminMoore", "Behr"]
BrandPreference = Literal["SherwinWilliams", "BenjaminMoore", "Behr", "pickForMe"]
Undertone = Literal["warm", "cool", "neutral", "green-gray", "blue-gray", "red-brown", "gold"]
UndertoneBias = Literal["warm", "cool", "neutral", "green-gray"]
ColorTag = Literal["wall", "trim", "cabinet", "accent", "door", "island", "ceiling", "best-seller"]
Role = Literal["anchor", "secondary", "accent"]

DaytimeBrightness = Literal["veryBright", "kindaBright", "dim"]
BulbColor = Literal["cozyYellow_2700K", "neutral_3000_3500K", "brightWhite_4000KPlus"]
BoldDarkerSpot = Literal["loveIt", "maybe", "noThanks"]
FloorLook = Literal[
    "yellowGoldWood",
    "orangeWood",
    "redBrownWood",
    "brownNeutral",
    "grayBrown",
    "tileOrStone",
    "other",
]
OverallVibe = Literal["mostlySoftNeutrals", "neutralsPlusGentleColors", "confidentColorMoments"]
WarmCoolFeel = Literal["warmer", "cooler", "inBetween"]
Contrast = Literal["verySoft", "medium", "crisp"]
Sheen = Literal["flat", "matte", "eggshell", "satin", "semi-gloss", "gloss"]

ROLES: tuple[Role, ...] = ("anchor", "secondary", "accent")

LrvBand = tuple[float, float]

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")

# Shared config: camelCase on the wire, snake_case in code, immutable once built.
_WIRE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
}


# === Catalog ===


class PaintColor(BaseModel):
    """One brand catalog entry.

    `tags=None` marks an untagged entry, which every role accepts.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    name: str = Field(min_length=1)
    hex: str
    lrv: float | None = Field(default=None, ge=0, le=100, alias="LRV")
    undertone: Undertone | None = None
    tags: frozenset[ColorTag] | None = None

    @field_validator("hex")
    @classmethod
    def _normalize_hex(cls, value: str) -> str:
        digits = value.strip().removeprefix("#")
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"hex must be 6 hex digits, got {value!r}")
        return f"#{digits.upper()}"

    @field_serializer("tags")
    def _sorted_tags(self, tags: frozenset[str] | None) -> list[str] | None:
        return None if tags is None else sorted(tags)


# === Interview answers ===


class ExistingElements(BaseModel):
    model_config = _WIRE_CONFIG

    floor_look: FloorLook | None = None


class ColorComfort(BaseModel):
    model_config = _WIRE_CONFIG

    overall_vibe: OverallVibe | None = None
    warm_cool_feel: WarmCoolFeel | None = None
    contrast_level: Contrast | None = None


class Guardrails(BaseModel):
    model_config = _WIRE_CONFIG

    must_haves: list[str] = []
    hard_nos: list[str] = []

    @field_validator("must_haves", "hard_nos", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class Answers(BaseModel):
    """One completed interview. Never mutated by the engine."""

    model_config = _WIRE_CONFIG

    room_type: str = Field(min_length=1)
    usage: str = Field(min_length=1)
    mood_words: list[str]
    daytime_brightness: DaytimeBrightness
    bulb_color: BulbColor
    bold_darker_spot: BoldDarkerSpot
    brand_preference: BrandPreference
    existing_elements: ExistingElements | None = None
    color_comfort: ColorComfort | None = None
    colors_to_avoid: list[str] = []
    guardrails: Guardrails | None = None

    @field_validator("colors_to_avoid", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value


# === Derived constraints ===


class Target(BaseModel):
    """Quantitative constraints resolved from one set of answers."""

    model_config = {"frozen": True}

    brand: Brand
    anchor_lrv: LrvBand
    secondary_lrv: LrvBand
    accent_lrv: LrvBand
    undertone_bias: UndertoneBias | None = None
    contrast: Contrast = "medium"

    def band_for(self, role: Role) -> LrvBand:
        return {
            "anchor": self.anchor_lrv,
            "secondary": self.secondary_lrv,
            "accent": self.accent_lrv,
        }[role]


# === Output ===


class RoleAssignments(BaseModel):
    model_config = _WIRE_CONFIG

    anchor: PaintColor
    secondary: PaintColor
    accent: PaintColor


class Rationale(BaseModel):
    model_config = _WIRE_CONFIG

    lighting: str
    mood: str
    floors: str


class Recommendation(BaseModel):
    """Final palette for one interview, ready to serialize with by_alias=True."""

    model_config = _WIRE_CONFIG

    brand: Brand
    roles: RoleAssignments
    rationale: Rationale
    seed: str
    rule_trace: list[str] = Field(min_length=6, max_length=6)


# === Color plan ===


class Placement(BaseModel):
    model_config = _WIRE_CONFIG

    area: str
    color_name: str
    hex: str
    sheen: Sheen


class AccentRule(BaseModel):
    model_config = _WIRE_CONFIG

    context: str
    guidance: str


class DoDont(BaseModel):
    model_config = _WIRE_CONFIG

    do: str
    dont: str


class RoomPlaybookEntry(BaseModel):
    model_config = _WIRE_CONFIG

    room_type: str
    placements: list[Placement]
    notes: str


class ColorPlan(BaseModel):
    """Where and how to use a recommended palette."""

    model_config = _WIRE_CONFIG

    name: str
    vibe: str
    brand: Brand
    placement_map: list[Placement] = Field(min_length=1)
    cohesion_tips: list[str] = []
    accent_rules: list[AccentRule] = []
    do_dont: list[DoDont] = []
    sample_sequence: list[str] = []
    room_playbook: list[RoomPlaybookEntry] = []
