from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)

SmoothingMode = Literal["snapshot", "in_place"]

ENV_PREFIX = "CAVEGEN_"


class CaveSettings(BaseModel):
    """Inputs for one cave generation run.

    Usage:
      settings = CaveSettings.load(user_path).from_env()
      grid = generate(settings)
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(64, description="Grid width in tiles")
    height: int = Field(48, description="Grid height in tiles")
    fill_percent: int = Field(45, description="Chance (0-100) that an interior tile starts as wall")
    seed: Optional[str] = Field(default=None, description="Seed string; None means time-derived")
    use_random_seed: bool = Field(False, description="Ignore `seed` and derive one from the clock")
    wall_threshold: int = Field(50, description="Wall regions smaller than this become open")
    room_threshold: int = Field(50, description="Open regions smaller than this become wall")
    border_size: int = Field(10, description="Width of the solid border added around the result")
    passage_radius: int = Field(5, description="Radius of the disc stamped along each passage")
    smoothing_passes: int = Field(5, description="Number of cellular automaton passes")
    smoothing_mode: SmoothingMode = Field("snapshot", description="snapshot (double-buffered) or in_place")

    @field_validator("width", "height")
    @classmethod
    def ensure_positive(cls, v: int, info) -> int:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator("fill_percent")
    @classmethod
    def ensure_percent(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"fill_percent must lie between 0 and 100, got {v}")
        return v

    @field_validator("wall_threshold", "room_threshold", "border_size", "smoothing_passes")
    @classmethod
    def ensure_non_negative(cls, v: int, info) -> int:
        if v < 0:
            raise ValueError(f"{info.field_name} must not be negative, got {v}")
        return v

    @field_validator("passage_radius")
    @classmethod
    def ensure_passage_radius(cls, v: int) -> int:
        # Radius 0 leaves diagonal line steps that do not 4-connect the rooms
        if v < 1:
            raise ValueError(f"passage_radius must be at least 1, got {v}")
        return v

    @field_validator("seed", mode="before")
    @classmethod
    def coerce_seed(cls, v: Any) -> Optional[str]:
        # YAML and env sources hand over ints for numeric seeds
        if v is None:
            return None
        return str(v)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CaveSettings":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            errors = []
            for err in exc.errors():
                loc = ".".join(str(p) for p in err["loc"]) or "<root>"
                errors.append(f"{loc}: {err['msg']}")
            raise InvalidConfiguration("Cave settings validation failed", errors) from exc

    @staticmethod
    def _load_yaml(path: Path) -> Dict[str, Any]:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise InvalidConfiguration(f"Settings file must contain a mapping: {path}")
        return raw

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "CaveSettings":
        """Load settings from built-in defaults and an optional user override file."""
        try:
            with resources.files("cavegen.data").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to model defaults.")
            data = {}

        if user_path is not None:
            if not user_path.exists():
                raise InvalidConfiguration(f"Settings file not found: {user_path}")
            data.update(cls._load_yaml(user_path))
            logger.info("Loaded user settings from %s", user_path)

        settings = cls.from_dict(data)
        logger.debug("Settings loaded: %s", settings)
        return settings

    def from_env(self, environ: Optional[Mapping[str, str]] = None) -> "CaveSettings":
        """Return a copy with CAVEGEN_* environment variables applied on top."""
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for name in type(self).model_fields:
            key = ENV_PREFIX + name.upper()
            if key in env:
                overrides[name] = env[key]
        if not overrides:
            return self
        logger.debug("Environment overrides: %s", sorted(overrides))
        return self.merged(overrides)

    def merged(self, overrides: Mapping[str, Any]) -> "CaveSettings":
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).from_dict(data)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
