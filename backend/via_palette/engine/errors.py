"""Errors raised by the palette engine.

All are synchronous and non-retryable from the engine's point of view; the
embedding service decides how to report them.
"""

from __future__ import annotations


class PaletteError(Exception):
    """Base class for every palette engine failure."""


class ConfigurationError(PaletteError):
    """The resolved brand has no catalog, or one too small to build a palette."""

    def __init__(self, brand: str, size: int, minimum: int) -> None:
        self.brand = brand
        self.size = size
        self.minimum = minimum
        if size == 0:
            detail = f"No catalog entries for brand {brand!r}"
        else:
            detail = f"Catalog for {brand!r} is too small ({size} entries, need {minimum})"
        super().__init__(detail)


class NoCandidatesError(PaletteError):
    """Every catalog entry was rejected for one role."""

    def __init__(self, role: str, brand: str | None = None) -> None:
        self.role = role
        self.brand = brand
        where = f" in {brand!r}" if brand else ""
        super().__init__(f"No {role} candidates match constraints{where}")


class EmptySelectionError(PaletteError):
    """A selector was handed an empty candidate list."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Cannot select {role} from an empty candidate list")


class CatalogLoadError(PaletteError):
    """Catalog data file is missing or malformed."""
