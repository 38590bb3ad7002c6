"""Shared fixtures: small raw star sets and CSV files on disk."""

import math
import os
from pathlib import Path

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from hrdiagram.models import RawStar, SpectralClassInfo, StarCatalog  # noqa: E402
from hrdiagram.pipeline import enrich  # noqa: E402


def _star(name, spect="G2V", temp=5778.0, radius=1.0, lum=1.0, bv=0.65, alt=None):
    return RawStar(
        name=name,
        alt_name=alt,
        spectral_type=spect,
        temperature=temp,
        radius=radius,
        luminosity=lum,
        color_index=bv,
    )


@pytest.fixture
def classes() -> tuple[SpectralClassInfo, ...]:
    return (
        SpectralClassInfo("G", "Yellow stars like the Sun."),
        SpectralClassInfo("K", "Orange stars."),
        SpectralClassInfo("M", "Red dwarfs."),
        SpectralClassInfo("A", "White stars."),
    )


@pytest.fixture
def raw_stars() -> tuple[RawStar, ...]:
    """Mixed input: normal rows, a join miss, undefined derivations, a duplicate name."""
    return (
        _star("Sun", alt="Sol"),
        _star("Proxima Centauri", spect="M5V", temp=3042.0, radius=0.154, lum=0.0017, bv=1.82,
              alt="Alpha Centauri C"),
        _star("Sirius B", spect="DA2", temp=25200.0, radius=0.0084, lum=0.056, bv=-0.03),
        _star("Dead Star", spect="", temp=math.nan, radius=math.nan, lum=0.0, bv=1.0),
        _star("Negative", spect="K1V", temp=5000.0, radius=0.8, lum=-3.0, bv=0.9),
        _star("Vega", spect="A0Va", temp=9602.0, radius=2.36, lum=40.1, bv=0.0),
        _star("Sun", spect="K0V", temp=5000.0, radius=0.9, lum=1.0, bv=0.8, alt="Impostor"),
    )


@pytest.fixture
def catalog(raw_stars, classes) -> StarCatalog:
    return StarCatalog(stars=enrich(raw_stars, classes), classes=classes)


@pytest.fixture
def csv_dir(tmp_path: Path) -> Path:
    (tmp_path / "stars.csv").write_text(
        "name,alt_name,spect_type,temp,R,L,bv_color\n"
        "Sun,Sol,G2V,5778,1,1,0.65\n"
        "Proxima Centauri,Alpha Centauri C,M5.5Ve,3042,0.154,0.0017,1.82\n"
        "Procyon B,,DQZ,7740,0.01234,0.00049,\n"
        "Oddball,NA,K2V,not-a-number,0.7,0.3,0.9\n",
        encoding="utf-8",
    )
    (tmp_path / "types.csv").write_text(
        "Type,Description\n"
        'G,"Yellow stars like the Sun."\n'
        'M,"Red dwarfs."\n'
        'M,"Duplicate entry, ignored."\n',
        encoding="utf-8",
    )
    return tmp_path
