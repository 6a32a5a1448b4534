"""Named profiles mapping to trait/part data directories.

Stored as TOML at ``click.get_app_dir("axiegenes")/config.toml``:

    default_profile = "live"

    [profiles.live]
    data_dir = '/srv/genes/live'
"""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

from axiegenes.config import missing_data_files

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_PROFILE_NAME_RE = re.compile(r"[a-zA-Z0-9_-]+")


@dataclass
class Profile:
    name: str
    data_dir: Path


@dataclass
class Config:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)

    @classmethod
    def from_toml(cls, data: dict) -> Config:
        config = cls(default_profile=data.get("default_profile"))
        for name, table in data.get("profiles", {}).items():
            config.add(name, Path(table["data_dir"]))
        return config

    def to_toml(self) -> str:
        # Literal strings (single quotes) keep Windows backslashes as-is
        lines = [f'default_profile = "{self.default_profile}"'] if self.default_profile else []
        for name, profile in self.profiles.items():
            lines += ["", f"[profiles.{name}]", f"data_dir = '{profile.data_dir}'"]
        return "\n".join(lines) + "\n"

    def add(self, name: str, data_dir: Path, default: bool = False) -> Profile:
        """Add or replace a profile; the first one added becomes the default."""
        profile = self.profiles[name] = Profile(name=name, data_dir=data_dir)
        if default or self.default_profile is None:
            self.default_profile = name
        return profile

    def get(self, name: str) -> Profile:
        try:
            return self.profiles[name]
        except KeyError:
            available = ", ".join(self.profiles) or "(none)"
            raise click.UsageError(
                f"Profile '{name}' not found. Available profiles: {available}"
            ) from None

    def describe(self) -> list[str]:
        """One display line per profile, marking the default."""
        return [
            f"  {name}: {p.data_dir}" + (" (default)" if name == self.default_profile else "")
            for name, p in self.profiles.items()
        ]


def get_config_path() -> Path:
    return Path(click.get_app_dir("axiegenes")) / "config.toml"


def load_config() -> Config:
    """Read the TOML config; an absent file is an empty Config."""
    path = get_config_path()
    if not path.exists():
        return Config()
    with open(path, "rb") as f:
        return Config.from_toml(tomllib.load(f))


def save_config(config: Config) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_toml(), encoding="utf-8")
    return path


def validate_profile_name(name: str) -> bool:
    """Profile names double as TOML bare keys."""
    return _PROFILE_NAME_RE.fullmatch(name) is not None


def resolve_data_dir(data_dir: Path | None, profile_name: str | None) -> Path:
    """Resolve the data directory: --data-dir > --profile > default profile.

    The chosen directory must hold both traits.json and parts.json.
    """
    if data_dir is not None:
        origin = "--data-dir"
    else:
        config = load_config()
        name = profile_name or config.default_profile
        if name is None:
            raise click.UsageError(
                "No data directory provided. Either:\n"
                "  1. Run 'axg init' to set up a profile\n"
                "  2. Pass --data-dir <path> explicitly\n"
                "  3. Pass --profile <name> to use a named profile"
            )
        data_dir = config.get(name).data_dir
        origin = f"profile '{name}'"

    missing = missing_data_files(data_dir)
    if missing:
        names = ", ".join(p.name for p in missing)
        raise click.UsageError(f"Missing {names} in data directory {data_dir} ({origin})")
    return data_dir
