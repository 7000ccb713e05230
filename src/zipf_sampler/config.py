"""
Configuration loader & schema for the Zipf sampler CLI.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional, Literal

import yaml  # type: ignore
from pydantic import BaseModel, Field, model_validator, ValidationError, ConfigDict

from .bench import DEFAULT_EXPONENT, DEFAULT_NUM_ELEMENTS, DEFAULT_SAMPLES
from .sampler import ZipfSampler


class DistributionConfig(BaseModel):
    """Support size and skew of the Zipf distribution."""

    num_elements: int = Field(
        DEFAULT_NUM_ELEMENTS, ge=0, description="Upper bound N of the support [1, N]"
    )
    exponent: float = Field(
        DEFAULT_EXPONENT, description="Zipf exponent s (must be > 0)"
    )

    @model_validator(mode="after")
    def check_sampler_constructs(self):
        # Surfaces ELEMENTS_ZERO / INVALID_EXPONENT at load time
        ZipfSampler(self.num_elements, self.exponent)
        return self

    model_config = ConfigDict(extra="forbid")


class SamplerConfig(BaseModel):
    """
    Configuration for the zipf-sampler CLI.

    Attributes:
      distribution (DistributionConfig): N and exponent.
      seed (Optional[int]): RNG seed; None seeds from OS entropy.
      draws (int): Number of values drawn by `sample` and `check`.
      out_path (Path): Output file for `sample` (.parquet or .csv).
      bench_samples (int): Number of draws timed by `bench`.
      log_level: Logging level name.
    """

    distribution: DistributionConfig = Field(default_factory=DistributionConfig)
    seed: Optional[int] = Field(None, description="RNG seed for reproducibility")
    draws: int = Field(100_000, gt=0, description="Number of values to draw")
    out_path: Path = Field(
        Path("outputs/zipf_samples.parquet"), description="Output file for drawn values"
    )
    bench_samples: int = Field(
        DEFAULT_SAMPLES, gt=0, description="Number of draws timed by the benchmark"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @model_validator(mode="before")
    def convert_paths(cls, values):
        if isinstance(values, dict):
            op = values.get("out_path")
            if isinstance(op, str):
                values["out_path"] = Path(op)
        return values

    model_config = ConfigDict(extra="forbid")


def build_sampler(cfg: SamplerConfig) -> ZipfSampler:
    return ZipfSampler(cfg.distribution.num_elements, cfg.distribution.exponent)


def read_config_data(path: Path) -> dict:
    """
    Read the raw mapping from a YAML config file without validating it.

    Raises FileNotFoundError if `path` is missing and ValueError if the YAML is
    malformed or its top level is not a mapping. An empty file gives ``{}``.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing config '{path}':\n{e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Error parsing config '{path}': expected a mapping, got {type(data).__name__}"
        )
    return data


def load_config(path: Path) -> SamplerConfig:
    """
    Load and validate a SamplerConfig from a YAML file.

    Parameters
    ----------
    path : Path
        Path to a YAML config file like ``config/sampler_config.yaml``.

    Returns
    -------
    SamplerConfig
        Validated config object.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML is malformed or any field is missing or invalid.
    """
    data = read_config_data(path)
    try:
        return SamplerConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Error parsing config '{path}':\n{e}") from e
