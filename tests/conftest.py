"""Shared test fixtures for statgrid tests."""

from __future__ import annotations

import pytest

from statgrid.config import GridProcessorConfig
from statgrid.processor import GridProcessor


@pytest.fixture
def default_config() -> GridProcessorConfig:
    """Return a default GridProcessorConfig."""
    return GridProcessorConfig()


@pytest.fixture
def processor(default_config: GridProcessorConfig) -> GridProcessor:
    """GridProcessor initialised with default config."""
    return GridProcessor(default_config)


@pytest.fixture
def province_grid() -> list[list[object]]:
    """Single header row naming a region column and two years."""
    return [
        ["Provinsi", "2020", "2021"],
        ["Jawa Barat", 120, 130],
        ["Jawa Timur", 140, 150],
    ]


@pytest.fixture
def gender_grid() -> list[list[object]]:
    """Two stacked header rows with a merged group label."""
    return [
        ["", "Gender", ""],
        ["Male", "Female", "Total"],
        ["Jakarta", 50, 60, 110],
    ]


@pytest.fixture
def population_grid() -> list[list[object]]:
    """Agency-style table: title, blank spacer, two header rows, data."""
    return [
        ["Tabel 3.1 Jumlah Penduduk Menurut Kabupaten/Kota"],
        [],
        ["Kabupaten/Kota", "Jenis Kelamin", "", ""],
        ["", "Laki-laki", "Perempuan", "Jumlah"],
        ["Bogor", 2781.5, 2695.2, 5476.7],
        ["Sukabumi", 1240.1, 1185.3, 2425.4],
        ["Cianjur", 1151.0, 1090.8, 2241.8],
    ]
