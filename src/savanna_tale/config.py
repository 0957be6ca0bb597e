"""Render settings resolved from the environment and command-line overrides."""

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .constants import DEFAULT_FPS

FPS_ENV = "SAVANNA_TALE_FPS"
SCALE_ENV = "SAVANNA_TALE_SCALE"
CAPTIONS_ENV = "SAVANNA_TALE_CAPTIONS"
LOOPS_ENV = "SAVANNA_TALE_LOOPS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """How a loop is rendered into frames."""
    fps: int = DEFAULT_FPS
    scale: float = 1.0
    captions: bool = False
    loops: int = 1

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RenderSettings":
        """
        Build settings from SAVANNA_TALE_* environment variables.

        Call load_dotenv() first to pick up a .env file.

        Raises:
            ValueError: If a variable is set but malformed
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        settings = cls(
            fps=_read(env, FPS_ENV, int, defaults.fps),
            scale=_read(env, SCALE_ENV, float, defaults.scale),
            captions=_read(env, CAPTIONS_ENV, _parse_bool, defaults.captions),
            loops=_read(env, LOOPS_ENV, int, defaults.loops),
        )
        settings.validate()
        return settings

    def with_overrides(self, **overrides: Any) -> "RenderSettings":
        """Return a copy with every override that is not None applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        settings = replace(self, **changes)
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")
        if self.loops <= 0:
            raise ValueError(f"loops must be positive, got {self.loops}")

    @property
    def frame_duration(self) -> float:
        """Exact time between frames in milliseconds."""
        return 1000 / self.fps


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _read(env: Mapping[str, str], name: str, parse: Any, default: Any) -> Any:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return parse(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {e}") from e
