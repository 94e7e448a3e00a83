"""Tests for the catalog store: packaged data, caching and validation."""

from __future__ import annotations

import json

import pytest
from structlog.testing import capture_logs

from via_palette.engine import catalog as catalog_module
from via_palette.engine.catalog import (
    DEFAULT_CATALOG_PATH,
    clear_caches,
    freeze_catalogs,
    load_catalogs,
)
from via_palette.engine.errors import CatalogLoadError
from via_palette.models.contracts import PaintColor


def _write(tmp_path, data) -> str:
    path = tmp_path / "catalogs.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestPackagedCatalogs:
    """The catalogs shipped with the package."""

    def test_three_brands_with_expected_sizes(self) -> None:
        """Three brands load with 12, 9 and 8 entries."""
        catalogs = load_catalogs()
        assert {brand: len(colors) for brand, colors in catalogs.items()} == {
            "SherwinWilliams": 12,
            "BenjaminMoore": 9,
            "Behr": 8,
        }

    def test_entries_are_paint_colors(self) -> None:
        """Every entry is validated into a PaintColor."""
        for colors in load_catalogs().values():
            assert all(isinstance(c, PaintColor) for c in colors)

    def test_known_entry(self) -> None:
        """Naval carries its hex, LRV, undertone and tags."""
        naval = next(c for c in load_catalogs()["SherwinWilliams"] if c.name == "Naval")
        assert naval.hex == "#2F3A4A"
        assert naval.lrv == 4
        assert naval.undertone == "cool"
        assert naval.tags == frozenset({"accent", "island"})

    def test_packaged_file_exists(self) -> None:
        """The default catalog file ships inside the package."""
        assert DEFAULT_CATALOG_PATH.is_file()


class TestCaching:
    """Catalogs load once per path and are read-only."""

    def test_loaded_once(self) -> None:
        """A second load hits the cache and logs nothing."""
        with capture_logs() as logs:
            first = load_catalogs()
            second = load_catalogs()
        assert first is second
        assert [log["event"] for log in logs] == ["catalog_loaded"]

    def test_clear_caches_reloads(self) -> None:
        """clear_caches forces a fresh load."""
        first = load_catalogs()
        clear_caches()
        assert load_catalogs() is not first

    def test_read_only(self) -> None:
        """The returned mapping rejects assignment and holds tuples."""
        catalogs = load_catalogs()
        with pytest.raises(TypeError):
            catalogs["Behr"] = ()  # type: ignore[index]
        assert isinstance(catalogs["Behr"], tuple)


class TestCustomPath:
    """Loading from an explicit or configured path."""

    def test_explicit_path(self, tmp_path) -> None:
        """An explicit path loads and normalizes its entries."""
        path = _write(
            tmp_path,
            {"Acme": [{"name": "Plain", "hex": "ffffff", "LRV": 93, "tags": ["trim"]}]},
        )
        catalogs = load_catalogs(path)
        assert list(catalogs) == ["Acme"]
        assert catalogs["Acme"][0].hex == "#FFFFFF"

    def test_path_from_settings(self, tmp_path, monkeypatch) -> None:
        """CATALOG_PATH is used when no path is given."""
        path = _write(tmp_path, {"Acme": []})
        monkeypatch.setattr(catalog_module.settings, "catalog_path", path)
        assert dict(load_catalogs()) == {"Acme": ()}

    def test_missing_file(self, tmp_path) -> None:
        """A missing file raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError, match="not found"):
            load_catalogs(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path) -> None:
        """Malformed JSON raises CatalogLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(CatalogLoadError, match="not valid JSON"):
            load_catalogs(path)

    def test_top_level_must_be_object(self, tmp_path) -> None:
        """A non-object top level raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError, match="map brand names"):
            load_catalogs(_write(tmp_path, [1, 2, 3]))

    def test_bad_entry_names_brand_and_index(self, tmp_path) -> None:
        """An invalid entry is reported as brand[index]."""
        path = _write(
            tmp_path,
            {
                "Acme": [
                    {"name": "Good", "hex": "#000000"},
                    {"name": "Bad", "hex": "#000000", "undertone": "purple"},
                ]
            },
        )
        with pytest.raises(CatalogLoadError, match=r"Acme\[1\]"):
            load_catalogs(path)


class TestFreezeCatalogs:
    """Tests for freeze_catalogs."""

    def test_accepts_models_and_mappings(self) -> None:
        """Models pass through untouched; mappings are validated."""
        model = PaintColor(name="Model", hex="#111111")
        frozen = freeze_catalogs({"Acme": [model, {"name": "Raw", "hex": "#222222"}]})
        assert frozen["Acme"][0] is model
        assert frozen["Acme"][1].name == "Raw"

    def test_rejects_non_list(self) -> None:
        """A brand must map to a list of colors."""
        with pytest.raises(CatalogLoadError, match="list of colors"):
            freeze_catalogs({"Acme": {"name": "Oops"}})
        with pytest.raises(CatalogLoadError):
            freeze_catalogs({"Acme": "Pure White"})
