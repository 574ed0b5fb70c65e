"""Configuration management system using Pydantic v2 and YAML.

This module provides type-safe configuration loading with validation
for the kinship engine: scoring weights, relevance threshold and the
file-similarity tier cutoffs.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import ConfigFileNotFoundError, ConfigurationError


def _check_sum(total: float, label: str) -> None:
    if not abs(total - 1.0) < 1e-3:
        raise ValueError(f"{label} weights must sum to 1.0, got {total}")


class VectorWeights(BaseModel):
    """Weights for the vector path: visual similarity dominates, metadata breaks ties."""

    visual: float = Field(default=0.8, ge=0.0, le=1.0, description="Weight of feature-vector cosine")
    medium: float = Field(default=0.12, ge=0.0, le=1.0, description="Weight of medium similarity")
    year: float = Field(default=0.08, ge=0.0, le=1.0, description="Weight of year proximity")

    @model_validator(mode='after')
    def validate_weights_sum(self) -> 'VectorWeights':
        """Ensure vector weights sum to 1.0."""
        _check_sum(self.visual + self.medium + self.year, "Vector")
        return self


class MetadataWeights(BaseModel):
    """Weights for the metadata fallback path."""

    medium: float = Field(default=0.6, ge=0.0, le=1.0, description="Weight of medium similarity")
    year: float = Field(default=0.4, ge=0.0, le=1.0, description="Weight of year proximity")

    @model_validator(mode='after')
    def validate_weights_sum(self) -> 'MetadataWeights':
        """Ensure metadata weights sum to 1.0."""
        _check_sum(self.medium + self.year, "Metadata")
        return self


class KinshipConfig(BaseModel):
    """Configuration for kinship relationship proposals."""

    min_relevance: float = Field(
        default=0.1, ge=0.0, le=1.0,
        description="Scores at or below this value are treated as noise",
    )
    score_precision: int = Field(default=3, ge=0, le=10, description="Decimals kept on stored scores")
    vector_weights: VectorWeights = Field(default_factory=VectorWeights)
    metadata_weights: MetadataWeights = Field(default_factory=MetadataWeights)


class RankerConfig(BaseModel):
    """Configuration for tiered file-similarity search."""

    high_threshold: int = Field(default=70, ge=0, le=100, description="Minimum percentage for the high tier")
    moderate_threshold: int = Field(default=40, ge=0, le=100, description="Minimum percentage for the moderate tier")
    distant_threshold: int = Field(default=15, ge=0, le=100, description="Minimum percentage kept at all")
    tier_limit: int = Field(default=5, ge=1, description="Maximum entries per tier")
    exact_match_score: float = Field(default=0.60, ge=0.0, le=1.0, description="Type-match score for identical file types")
    code_like_score: float = Field(default=0.55, ge=0.0, le=1.0, description="Type-match score when both types are code-like")
    fallback_score: float = Field(default=0.10, ge=0.0, le=1.0, description="Type-match score for unrelated types")
    code_like_types: list[str] = Field(
        default_factory=lambda: ["html", "htm", "js"],
        description="File types treated as living code",
    )
    candidate_pool_limit: int = Field(default=200, ge=1, description="Maximum artworks ranked per search")

    @field_validator('code_like_types')
    @classmethod
    def normalize_code_like_types(cls, v: list[str]) -> list[str]:
        """Lowercase and strip leading dots from file type tags."""
        return [t.lower().lstrip('.') for t in v if t]

    @model_validator(mode='after')
    def validate_thresholds(self) -> 'RankerConfig':
        """Ensure tier cutoffs are strictly decreasing."""
        if not self.high_threshold > self.moderate_threshold > self.distant_threshold:
            raise ValueError(
                "Tier thresholds must be strictly decreasing: "
                f"{self.high_threshold} > {self.moderate_threshold} > {self.distant_threshold}"
            )
        return self


class AppConfig(BaseModel):
    """Root configuration model containing all sub-configurations."""

    kinship: KinshipConfig = Field(default_factory=KinshipConfig)
    ranker: RankerConfig = Field(default_factory=RankerConfig)
    related_limit: int = Field(default=20, ge=1, description="Maximum related works returned per artwork")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Choose from: {valid_levels}")
        return v_upper

    @classmethod
    def from_yaml(cls, config_path: Path | str) -> 'AppConfig':
        """Read and validate a YAML configuration file.

        Raises:
            ConfigFileNotFoundError: If the file doesn't exist
            ConfigurationError: If the YAML is malformed or values are invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            example_path = config_path.parent / "config.example.yaml"
            raise ConfigFileNotFoundError(
                f"Configuration file not found: {config_path}. "
                f"Copy {example_path} to {config_path} or set KINSHIP_CONFIG.",
                path=str(config_path),
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                config_dict = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Could not parse {config_path}: {exc}",
                    context={"path": str(config_path)},
                ) from exc

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Top level of {config_path} must be a mapping",
                context={"path": str(config_path)},
            )

        try:
            return cls.model_validate(config_dict)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}",
                context={"path": str(config_path), "errors": exc.errors()},
            ) from exc


# Singleton pattern for configuration
_config: Optional[AppConfig] = None


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to configuration file. Defaults to the KINSHIP_CONFIG
                    env var, then config/config.yaml relative to project root

    Returns:
        Validated AppConfig instance
    """
    if config_path is None:
        env_config_path = os.environ.get('KINSHIP_CONFIG')
        if env_config_path:
            config_path = Path(env_config_path)
        else:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"

    return AppConfig.from_yaml(config_path)


def get_config(config_path: Optional[Path | str] = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern).

    Args:
        config_path: Path to configuration file (only used on first call or if reload=True)
        reload: Force reload of configuration

    Returns:
        Cached or newly loaded AppConfig instance
    """
    global _config

    if _config is None or reload:
        _config = load_config(config_path)

    return _config


def reset_config() -> None:
    """Reset cached configuration (useful for testing)."""
    global _config
    _config = None
