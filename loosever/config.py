from __future__ import annotations

from dataclasses import dataclass

KNOWN_PREFIXES: tuple[str, ...] = ("v.", "ver.", "version.")
DEFAULT_FORMAT = "RPM"


@dataclass(frozen=True)
class VersionSettings:
    # Prefixes are case-sensitive and only stripped when followed by whitespace.
    known_prefixes: tuple[str, ...] = KNOWN_PREFIXES
    default_format: str = DEFAULT_FORMAT


DEFAULT_SETTINGS = VersionSettings()


def resolve_settings(settings: VersionSettings | None) -> VersionSettings:
    return DEFAULT_SETTINGS if settings is None else settings
