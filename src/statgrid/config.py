"""Configuration model for the statgrid pipeline.

Provides ``GridProcessorConfig`` holding every heuristic threshold used by
the row classifier, header merger and column profiler.  Supports loading
overrides from YAML or JSON files via the ``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import os
import pathlib
from typing import Any, Callable

import yaml
from pydantic import BaseModel, Field, model_validator


class GridProcessorConfig(BaseModel):
    """All tunable parameters with sensible defaults.

    Override individual values via constructor kwargs or load a complete
    config from a file with ``GridProcessorConfig.from_file(path)``.
    """

    # --- Identity ---
    parser_version: str = "statgrid:1.0.0"

    # --- Grid validation ---
    min_grid_rows: int = Field(
        default=2,
        ge=1,
        description="Grids with fewer rows than this cannot be cleaned or profiled.",
    )

    # --- Row classification ---
    scan_row_limit: int = Field(
        default=25,
        ge=1,
        description="Number of leading rows scanned when looking for the first data row.",
    )
    narrow_row_ratio: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Rows narrower than this fraction of the widest row are title fragments.",
    )
    numeric_ratio_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Share of filled cells that must be numeric for a dense integer row.",
    )
    year_ratio_threshold: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Share of filled cells that must look like years for a year header row.",
    )
    min_filled_for_dense_row: int = Field(
        default=2,
        ge=0,
        description="A dense integer row needs strictly more filled cells than this.",
    )
    year_lower_bound: int = 1900
    year_upper_bound: int = 2100
    header_keywords: list[str] = [
        "provinsi",
        "kabupaten",
        "wilayah",
        "tabel",
        "keterangan",
    ]

    # --- Header merging ---
    max_header_rows: int = Field(
        default=4,
        ge=1,
        description="Maximum number of stacked rows merged into the final header.",
    )
    header_separator: str = " - "
    placeholder_template: str = "Column {index}"

    # --- Column profiling ---
    profile_sample_rows: int = Field(
        default=50,
        ge=1,
        description="Number of leading data rows used to profile columns.",
    )
    categorical_max_distinct: int = 20
    categorical_sample_count: int = 5
    text_sample_count: int = 3
    raw_preview_rows: int = 10

    # --- Logging / PII safety ---
    log_sample_data: bool = False

    @model_validator(mode="after")
    def _check_year_bounds(self) -> GridProcessorConfig:
        if self.year_lower_bound >= self.year_upper_bound:
            raise ValueError(
                f"year_lower_bound ({self.year_lower_bound}) must be below "
                f"year_upper_bound ({self.year_upper_bound})"
            )
        return self

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> GridProcessorConfig:
        """Build a config from a YAML (``.yaml``/``.yml``) or JSON file.

        The file holds a mapping of field overrides; omitted fields keep
        their defaults and an empty file yields the default config.

        Raises:
            FileNotFoundError: If *path* does not exist.
            ValueError: If the extension is not recognized or the file does
                not hold a mapping.
        """
        config_path = pathlib.Path(path)
        loader = _LOADERS.get(config_path.suffix.lower())
        if loader is None:
            raise ValueError(
                f"Unsupported config file extension '{config_path.suffix}'. "
                f"Use one of: {', '.join(sorted(_LOADERS))}."
            )
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        overrides = loader(config_path.read_text(encoding="utf-8")) or {}
        if not isinstance(overrides, dict):
            raise ValueError(
                f"Config file {config_path} must hold a mapping, "
                f"got {type(overrides).__name__}."
            )
        return cls.model_validate(overrides)


_LOADERS: dict[str, Callable[[str], Any]] = {
    ".json": json.loads,
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
}
