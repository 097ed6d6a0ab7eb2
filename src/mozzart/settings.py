"""
Catalog settings - which named constants the catalog is built with.

Settings are a frozen pydantic model. They can be read from YAML text;
reading the file itself is left to the caller.

Example YAML:

    min_octave: 0
    max_octave: 8
    scale_qualities: [major, natural_minor]
    include_enharmonic_aliases: false
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from mozzart.constants import MAX_OCTAVE, MIN_OCTAVE, ErrorMessages
from mozzart.core.scale import CANONICAL_SCALE_QUALITIES, ScaleQuality


class CatalogSettings(BaseModel):
    """Options controlling what the constants catalog contains."""

    min_octave: int = Field(
        default=MIN_OCTAVE,
        ge=MIN_OCTAVE,
        le=MAX_OCTAVE,
        description="Lowest octave to name pitches and build scales in",
    )
    max_octave: int = Field(
        default=MAX_OCTAVE,
        ge=MIN_OCTAVE,
        le=MAX_OCTAVE,
        description="Highest octave to name pitches and build scales in",
    )
    scale_qualities: tuple[ScaleQuality, ...] = Field(
        default=CANONICAL_SCALE_QUALITIES,
        description="Scale qualities to pre-build for every key and octave",
    )
    include_enharmonic_aliases: bool = Field(
        default=True,
        description="Also register flat and enum spellings (Db4, Cs4) for black keys",
    )

    model_config = {"frozen": True}

    @field_validator("scale_qualities", mode="before")
    @classmethod
    def _parse_qualities(cls, value: Any) -> Any:
        """Accept loose names such as 'minor' or 'Harmonic Minor'."""
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple)):
            return tuple(ScaleQuality.parse(item) for item in value)
        return value

    @field_validator("scale_qualities")
    @classmethod
    def _require_qualities(cls, value: tuple[ScaleQuality, ...]) -> tuple[ScaleQuality, ...]:
        if not value:
            raise ValueError(ErrorMessages.EMPTY_SCALE_QUALITIES)
        # Drop duplicates, keep order
        return tuple(dict.fromkeys(value))

    @model_validator(mode="after")
    def _check_octave_range(self) -> CatalogSettings:
        if self.min_octave > self.max_octave:
            raise ValueError(
                ErrorMessages.OCTAVE_RANGE_ORDER.format(low=self.min_octave, high=self.max_octave)
            )
        return self

    @property
    def octaves(self) -> range:
        """Configured octaves, inclusive of both ends."""
        return range(self.min_octave, self.max_octave + 1)

    @classmethod
    def from_yaml(cls, text: str) -> CatalogSettings:
        """
        Parse settings from YAML text.

        Args:
            text: YAML document; empty text gives the defaults

        Returns:
            Validated settings
        """
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(ErrorMessages.SETTINGS_NOT_MAPPING.format(kind=type(data).__name__))
        return cls.model_validate(data)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "min_octave": self.min_octave,
            "max_octave": self.max_octave,
            "scale_qualities": [quality.value for quality in self.scale_qualities],
            "include_enharmonic_aliases": self.include_enharmonic_aliases,
        }

    def to_yaml(self) -> str:
        """Dump settings as YAML text."""
        return yaml.safe_dump(self.to_yaml_dict(), sort_keys=False)
