"""Catalog store: brand catalogs of candidate paint colors.

Pure Python module. Catalog files are read once per path and cached for the
life of the process; the engine only ever sees read-only tuples of frozen
PaintColor models.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import ValidationError

from via_palette.config import settings
from via_palette.engine.errors import CatalogLoadError
from via_palette.models.contracts import PaintColor

log = structlog.get_logger("catalog")

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "catalogs.json"

Catalogs = Mapping[str, tuple[PaintColor, ...]]

_catalog_cache: dict[Path, Catalogs] = {}


def freeze_catalogs(raw: Mapping[str, Iterable[PaintColor | Mapping[str, Any]]]) -> Catalogs:
    """Validate raw brand → entries data into a read-only catalog mapping.

    Raises CatalogLoadError naming the brand and index of the first bad entry.
    """
    frozen: dict[str, tuple[PaintColor, ...]] = {}
    for brand, entries in raw.items():
        if isinstance(entries, (str, bytes, Mapping)) or not isinstance(entries, Iterable):
            raise CatalogLoadError(f"Catalog for {brand!r} must be a list of colors")
        colors: list[PaintColor] = []
        for index, entry in enumerate(entries):
            if isinstance(entry, PaintColor):
                colors.append(entry)
                continue
            try:
                colors.append(PaintColor.model_validate(entry))
            except ValidationError as exc:
                raise CatalogLoadError(
                    f"Invalid color at {brand}[{index}]: {exc.errors()[0]['msg']}"
                ) from exc
        frozen[brand] = tuple(colors)
    return MappingProxyType(frozen)


def _resolve_path(path: str | Path | None) -> Path:
    if path:
        return Path(path).resolve()
    if settings.catalog_path:
        return Path(settings.catalog_path).resolve()
    return DEFAULT_CATALOG_PATH


def load_catalogs(path: str | Path | None = None) -> Catalogs:
    """Load and cache brand catalogs from JSON.

    Falls back to CATALOG_PATH, then to the packaged sample catalogs.
    """
    catalog_path = _resolve_path(path)
    if catalog_path in _catalog_cache:
        return _catalog_cache[catalog_path]

    try:
        raw = json.loads(catalog_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {catalog_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise CatalogLoadError(f"Catalog file must map brand names to color lists: {catalog_path}")

    catalogs = freeze_catalogs(raw)
    _catalog_cache[catalog_path] = catalogs
    log.info(
        "catalog_loaded",
        path=str(catalog_path),
        brand_counts={brand: len(colors) for brand, colors in catalogs.items()},
    )
    return catalogs


def clear_caches() -> None:
    """Drop cached catalogs. Used in tests."""
    _catalog_cache.clear()
