"""
Tests for the YAML-backed scale registry.

Covers:
  - The shipped default scales load and hold known values
  - Tables are read-only
  - Corrupt or incomplete data directories fail at construction
  - generate_fluid_keys pair enumeration
"""

import pytest
import yaml

from fluid_clamp.scales.registry import (
    EXCLUDED_PAIR_KEYS,
    ScaleKind,
    ScaleRegistry,
    generate_fluid_keys,
    get_registry,
)


@pytest.fixture(scope="module")
def registry():
    return get_registry()


def _minimal_scales() -> dict:
    return {
        "spacing": {"0": "0px", "4": "1rem"},
        "fontSize": {"base": "1rem"},
        "lineHeight": {"normal": "1.5"},
        "letterSpacing": {"normal": "0em"},
        "borderRadius": {"md": "0.375rem"},
        "borderWidth": {"DEFAULT": "1px"},
    }


def _write(tmp_path, data) -> None:
    (tmp_path / "scales.yaml").write_text(yaml.safe_dump(data))


# ── Shipped data ───────────────────────────────────────────────────────────────


class TestDefaultScales:
    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_every_kind_loaded(self, registry):
        for kind in ScaleKind:
            assert len(registry.get_scale(kind)) > 0

    def test_spacing_values(self, registry):
        spacing = registry.get_scale(ScaleKind.SPACING)
        assert spacing["4"] == "1rem"
        assert spacing["0.5"] == "0.125rem"
        assert spacing["px"] == "1px"

    def test_font_size_values(self, registry):
        font_size = registry.get_scale("fontSize")
        assert font_size["base"] == "1rem"
        assert font_size["xs"] == "0.75rem"
        assert font_size["9xl"] == "8rem"

    def test_line_height_allows_multipliers(self, registry):
        assert registry.get_scale(ScaleKind.LINE_HEIGHT)["normal"] == "1.5"

    def test_tables_are_read_only(self, registry):
        with pytest.raises(TypeError):
            registry.get_scale(ScaleKind.SPACING)["4"] = "2rem"  # type: ignore[index]

    def test_unknown_kind(self, registry):
        with pytest.raises(ValueError):
            registry.get_scale("zIndex")


# ── Load-time validation ───────────────────────────────────────────────────────


class TestCustomDataDir:
    def test_minimal_data_loads(self, tmp_path):
        _write(tmp_path, _minimal_scales())
        reg = ScaleRegistry(tmp_path)
        assert reg.get_scale("spacing")["4"] == "1rem"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Scale data file not found"):
            ScaleRegistry(tmp_path)

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "scales.yaml").write_text("spacing: {4: [\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            ScaleRegistry(tmp_path)

    def test_not_a_mapping(self, tmp_path):
        _write(tmp_path, ["spacing"])
        with pytest.raises(ValueError, match="must contain a mapping"):
            ScaleRegistry(tmp_path)

    def test_unknown_scale(self, tmp_path):
        data = _minimal_scales()
        data["zIndex"] = {"10": "10"}
        _write(tmp_path, data)
        with pytest.raises(ValueError, match="Unknown scale 'zIndex'"):
            ScaleRegistry(tmp_path)

    def test_scale_not_a_mapping(self, tmp_path):
        data = _minimal_scales()
        data["spacing"] = ["1rem"]
        _write(tmp_path, data)
        with pytest.raises(ValueError, match="must be a mapping"):
            ScaleRegistry(tmp_path)

    def test_missing_scale(self, tmp_path):
        data = _minimal_scales()
        del data["borderWidth"]
        _write(tmp_path, data)
        with pytest.raises(ValueError, match="missing scale 'borderWidth'"):
            ScaleRegistry(tmp_path)

    def test_bad_literal(self, tmp_path):
        data = _minimal_scales()
        data["fontSize"]["huge"] = "big"
        _write(tmp_path, data)
        with pytest.raises(ValueError, match="fontSize.huge"):
            ScaleRegistry(tmp_path)

    def test_unitless_outside_line_height(self, tmp_path):
        data = _minimal_scales()
        data["spacing"]["8"] = "2"
        _write(tmp_path, data)
        with pytest.raises(ValueError, match="has no unit"):
            ScaleRegistry(tmp_path)


# ── Key enumeration ────────────────────────────────────────────────────────────


class TestGenerateFluidKeys:
    def test_ordered_pairs_of_distinct_keys(self):
        keys = generate_fluid_keys({"sm": "1rem", "md": "2rem", "lg": "3rem"})
        assert keys == ["sm/md", "sm/lg", "md/sm", "md/lg", "lg/sm", "lg/md"]

    def test_excluded_keys_skipped(self):
        scale = {"DEFAULT": "1px", "none": "0px", "0": "0px", "2": "2px", "full": "9999px"}
        assert generate_fluid_keys(scale) == ["0/2", "2/0"]

    def test_excluded_set(self):
        assert EXCLUDED_PAIR_KEYS == {"DEFAULT", "none", "full"}

    def test_default_spacing_pairs(self, registry):
        keys = generate_fluid_keys(registry.get_scale(ScaleKind.SPACING))
        assert "4/8" in keys
        assert "4/4" not in keys
