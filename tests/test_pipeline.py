"""
Unit tests for CSV loading and the enrichment pipeline.

Tests cover:
- Loader validation and DataLoadError cases
- Spectral initial, left-outer join, and log luminosity derivation
- Tooltip label format and 2dp formatting
- Determinism of the enriched output
"""

import math

import pytest

from hrdiagram.models import RawStar
from hrdiagram.pipeline import (
    DataLoadError,
    build_catalog,
    enrich,
    format_2dp,
    load_spectral_classes,
    load_stars,
    log_luminosity,
    spectral_initial,
)


class TestLoader:
    """Test loading of the two CSV sources."""

    def test_load_stars(self, csv_dir):
        stars = load_stars(csv_dir / "stars.csv")
        assert [s.name for s in stars] == ["Sun", "Proxima Centauri", "Procyon B", "Oddball"]
        sun = stars[0]
        assert sun.alt_name == "Sol"
        assert sun.spectral_type == "G2V"
        assert sun.temperature == 5778.0
        assert sun.luminosity == 1.0

    def test_blank_and_na_alt_name_become_none(self, csv_dir):
        stars = load_stars(csv_dir / "stars.csv")
        assert stars[2].alt_name is None
        assert stars[3].alt_name is None

    def test_unparseable_numbers_become_nan(self, csv_dir):
        stars = load_stars(csv_dir / "stars.csv")
        assert math.isnan(stars[2].color_index)
        assert math.isnan(stars[3].temperature)
        assert stars[3].radius == 0.7

    def test_alt_name_column_is_optional(self, tmp_path):
        path = tmp_path / "stars.csv"
        path.write_text("name,spect_type,temp,R,L,bv_color\nSun,G2V,5778,1,1,0.65\n")
        (star,) = load_stars(path)
        assert star.alt_name is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="not found"):
            load_stars(tmp_path / "nope.csv")

    def test_missing_required_columns(self, tmp_path):
        path = tmp_path / "stars.csv"
        path.write_text("name,spect_type,temp\nSun,G2V,5778\n")
        with pytest.raises(DataLoadError) as exc:
            load_stars(path)
        assert "R" in str(exc.value)
        assert "bv_color" in str(exc.value)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "stars.csv"
        path.write_text("")
        with pytest.raises(DataLoadError, match="Cannot read"):
            load_stars(path)

    def test_class_file_needs_type_and_description(self, tmp_path):
        path = tmp_path / "types.csv"
        path.write_text("Code,Text\nG,Sun-like\n")
        with pytest.raises(DataLoadError, match="Type"):
            load_spectral_classes(path)

    def test_load_spectral_classes(self, csv_dir):
        classes = load_spectral_classes(csv_dir / "types.csv")
        assert [c.type_code for c in classes] == ["G", "M", "M"]
        assert classes[0].description == "Yellow stars like the Sun."


class TestDerivations:
    """Test the per-field derivation helpers."""

    def test_spectral_initial(self):
        assert spectral_initial("G2V") == "G"
        assert spectral_initial("M") == "M"
        assert spectral_initial("") == ""

    def test_log_luminosity_positive(self):
        assert abs(log_luminosity(0.0017) - math.log10(0.0017)) < 1e-9
        assert log_luminosity(1.0) == 0.0

    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan])
    def test_log_luminosity_undefined(self, value):
        assert math.isnan(log_luminosity(value))

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5778.0, "5778"),
            (-2.769551, "-2.77"),
            (1.5, "1.5"),
            (0.65, "0.65"),
            (0.0, "0"),
            (-0.001, "0"),
            (math.nan, "NaN"),
            (math.inf, "Inf"),
        ],
    )
    def test_format_2dp(self, value, expected):
        assert format_2dp(value) == expected


class TestEnrich:
    """Test the enrichment pipeline as a whole."""

    def test_left_outer_join_keeps_every_row(self, raw_stars, classes):
        enriched = enrich(raw_stars, classes)
        assert len(enriched) == len(raw_stars)
        assert [s.name for s in enriched] == [s.name for s in raw_stars]

    def test_join_matches_initial(self, raw_stars, classes):
        by_name = {s.name: s for s in reversed(enrich(raw_stars, classes))}
        proxima = by_name["Proxima Centauri"]
        assert proxima.spectral_initial == "M"
        assert proxima.description == "Red dwarfs."

    def test_join_miss_has_no_description(self, raw_stars, classes):
        enriched = {s.name: s for s in enrich(raw_stars, classes)}
        assert enriched["Sirius B"].description is None
        assert enriched["Dead Star"].spectral_initial == ""
        assert enriched["Dead Star"].description is None

    def test_spectral_initial_invariant(self, raw_stars, classes):
        for star in enrich(raw_stars, classes):
            if star.spectral_type:
                assert star.spectral_initial == star.spectral_type[0]
            else:
                assert star.spectral_initial == ""

    def test_log_luminosity_invariant(self, raw_stars, classes):
        for star in enrich(raw_stars, classes):
            if star.luminosity > 0:
                assert abs(star.log_luminosity - math.log10(star.luminosity)) < 1e-9
            else:
                assert math.isnan(star.log_luminosity)

    def test_proxima_log_luminosity(self, raw_stars, classes):
        proxima = next(s for s in enrich(raw_stars, classes) if s.name == "Proxima Centauri")
        assert round(proxima.log_luminosity, 2) == -2.77

    def test_first_class_description_wins(self, csv_dir):
        catalog = build_catalog(csv_dir / "stars.csv", csv_dir / "types.csv")
        proxima = catalog.find("Proxima Centauri")
        assert proxima.description == "Red dwarfs."

    def test_tooltip_label(self, raw_stars, classes):
        sun = enrich(raw_stars, classes)[0]
        assert sun.tooltip_label == (
            "Name: Sun<br>"
            "Alt: Sol<br>"
            "Spectral Type: G2V<br>"
            "Temp: 5778 K<br>"
            "Radius: 1 R☉<br>"
            "Log Luminosity: 0 L☉<br>"
            "Color Index (B–V): 0.65"
        )

    def test_tooltip_with_undefined_fields(self, raw_stars, classes):
        dead = next(s for s in enrich(raw_stars, classes) if s.name == "Dead Star")
        assert "Alt: NA<br>" in dead.tooltip_label
        assert "Temp: NaN K" in dead.tooltip_label
        assert "Log Luminosity: NaN L☉" in dead.tooltip_label

    def test_enrichment_is_idempotent(self, raw_stars, classes):
        assert enrich(raw_stars, classes) == enrich(raw_stars, classes)

    def test_input_is_not_mutated(self, raw_stars, classes):
        before = tuple(raw_stars)
        enrich(raw_stars, classes)
        assert raw_stars == before
        assert all(isinstance(s, RawStar) for s in raw_stars)

    def test_undefined_derivation_logs_warning(self, raw_stars, classes, caplog):
        with caplog.at_level("WARNING", logger="hrdiagram.pipeline"):
            enrich(raw_stars, classes)
        assert "Log luminosity undefined for 'Dead Star'" in caplog.text
        assert "No spectral class description for 'Sirius B'" in caplog.text


class TestBuildCatalog:
    """Test the load + enrich entry point."""

    def test_build_catalog(self, csv_dir):
        catalog = build_catalog(csv_dir / "stars.csv", csv_dir / "types.csv")
        assert len(catalog) == 4
        assert catalog.find("Procyon B").description is None
        assert catalog.stars_path == csv_dir / "stars.csv"

    def test_bundled_sample_loads(self):
        from hrdiagram.config import DEFAULT_CLASSES_CSV, DEFAULT_STARS_CSV

        catalog = build_catalog(DEFAULT_STARS_CSV, DEFAULT_CLASSES_CSV)
        assert len(catalog) > 20
        assert catalog.find("Proxima Centauri").description is not None
        assert catalog.find("Sirius B").description is None

    def test_missing_classes_file_is_fatal(self, csv_dir):
        with pytest.raises(DataLoadError):
            build_catalog(csv_dir / "stars.csv", csv_dir / "missing.csv")
