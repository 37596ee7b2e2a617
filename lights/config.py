"""Game parameters and TOML-backed configuration files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

import tomli_w

__all__ = ["WindowMode", "GameParameters", "Configuration"]


class WindowMode(IntEnum):
    """How the game window is shown."""

    WINDOWED = 0
    BORDERLESS_FULLSCREEN = 1


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value


@dataclass
class GameParameters:
    """Engine and window settings."""

    fps: float = 120.0
    window_mode: WindowMode = WindowMode.WINDOWED
    window_size: tuple[int, int] = (1280, 720)

    @classmethod
    def from_toml(cls, data: dict[str, Any]) -> GameParameters:
        """Build parameters from parsed TOML; raise ValueError if anything is missing or mistyped."""
        try:
            fps = data["Engine"]["FPS"]
            if not isinstance(fps, float):
                raise TypeError(f"Engine.FPS must be a float, got {fps!r}")
            window = data["Window"]
            mode = WindowMode(_integer(window["Mode"]))
            size = window["Size"]
            width, height = _integer(size[0]), _integer(size[1])
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid game parameters: {exc}") from exc
        return cls(fps=fps, window_mode=mode, window_size=(width, height))

    def to_toml(self) -> dict[str, Any]:
        """Return the parameters as a TOML-ready mapping."""
        width, height = self.window_size
        return {
            "Engine": {"FPS": float(self.fps)},
            "Window": {"Mode": int(self.window_mode), "Size": [int(width), int(height)]},
        }


class _TomlConvertible(Protocol):
    @classmethod
    def from_toml(cls, data: dict[str, Any]) -> Any: ...

    def to_toml(self) -> dict[str, Any]: ...


T = TypeVar("T", bound=_TomlConvertible)


class Configuration(Generic[T]):
    """Loads a settings object from a TOML file, or writes defaults when the file is new."""

    def __init__(
        self,
        config_path: str | Path,
        config_type: type[T] = GameParameters,  # type: ignore[assignment]
        save_if_new: bool = True,
    ) -> None:
        self.config_path = Path(config_path)
        if self.config_path.exists():
            with self.config_path.open("rb") as handle:
                data = tomllib.load(handle)
            self.config: T = config_type.from_toml(data)
        else:
            self.config = config_type()
            if save_if_new:
                self.save()

    def save(self) -> None:
        """Write the current settings to the configuration file."""
        self.config_path.write_text(self.to_string(), encoding="utf-8")

    def to_string(self) -> str:
        """Return the current settings as TOML text."""
        return tomli_w.dumps(self.config.to_toml())