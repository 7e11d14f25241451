from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from loosever.comparison import Comparison, is_numeric
from loosever.config import VersionSettings, resolve_settings
from loosever.errors import ComponentOutOfRangeError, MissingArgumentError, VersionFormatError

logger = logging.getLogger(__name__)

# Upper bound for components adapted from dotted numeric identifiers (signed 32-bit).
MAX_COMPONENT = 2**31 - 1


class ReleaseKind(str, Enum):
    RELEASE = "release"
    RELEASE_CANDIDATE = "release_candidate"
    BETA = "beta"
    ALPHA = "alpha"
    UNKNOWN = "unknown"


class _ScanState(Enum):
    RELEASE = "release"
    PRE_RELEASE = "pre_release"


_CANDIDATE_MARKERS = ("rc", "candidate", "releasecandidate")


def _is_alphanumeric(text: str) -> bool:
    return not text or (text.isascii() and text.isalnum())


def _is_digits(text: str) -> bool:
    return not text or is_numeric(text)


def trim_item(token: str | None) -> str:
    """Trim a single token and strip leading zeros from all-digit tokens.

    ``"007"`` becomes ``"7"``, ``"000"`` becomes ``"0"``; ``"00b"`` is left alone.
    """
    text = (token or "").strip()
    if is_numeric(text):
        return text.lstrip("0") or "0"
    return text


def compress_list(tokens: Iterable[str]) -> tuple[str, ...]:
    """Drop trailing ``"0"`` and empty tokens."""
    items = list(tokens)
    for i in range(len(items) - 1, -1, -1):
        if items[i] not in ("", "0"):
            return tuple(items[: i + 1])
    return ()


def _normalize_tokens(tokens: Iterable[str | None], name: str) -> tuple[str, ...]:
    if isinstance(tokens, str):
        raise TypeError(f"{name} must be a sequence of tokens, not a string (use parse())")
    return compress_list(trim_item(token) for token in tokens)


def _format_release(release: tuple[str, ...]) -> str:
    if not release:
        return "0.0.0"
    if len(release) == 1:
        return f"{release[0]}.0.0"
    if len(release) == 2:
        return f"{release[0]}.{release[1]}.0"
    return ".".join(release)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A tolerant, normalized semantic-version-like value.

    Any sequence of tokens is accepted for ``release`` and ``pre_release``;
    ``None`` items become empty tokens. Tokens are trimmed, numerals lose
    their leading zeros and trailing ``"0"``/empty tokens are dropped, so
    ``Version(("1", "0"))`` equals ``Version(("01",))``.

    Equality, ordering and hashing follow ``Comparison.DEFAULT``.
    """

    release: tuple[str, ...]
    pre_release: tuple[str, ...] = ()
    metadata: str = ""

    NONE: ClassVar[Version]

    def __post_init__(self) -> None:
        if self.release is None:
            raise MissingArgumentError("release must not be None")
        object.__setattr__(self, "release", _normalize_tokens(self.release, "release"))
        pre_release = () if self.pre_release is None else self.pre_release
        object.__setattr__(self, "pre_release", _normalize_tokens(pre_release, "pre_release"))
        metadata = "" if self.metadata is None else str(self.metadata).strip()
        object.__setattr__(self, "metadata", metadata)

    @classmethod
    def parse(cls, raw: str | None, *, settings: VersionSettings | None = None) -> Version:
        return parse(raw, settings=settings)

    @classmethod
    def try_parse(
        cls, raw: str | None, *, settings: VersionSettings | None = None
    ) -> tuple[Version, bool]:
        return try_parse(raw, settings=settings)

    @classmethod
    def from_ints(cls, *components: int) -> Version:
        """Build a release-only version from one to four non-negative integers."""
        if not 1 <= len(components) <= 4:
            raise TypeError(f"expected 1 to 4 components, got {len(components)}")
        for value in components:
            if value < 0:
                raise ComponentOutOfRangeError(f"version component must be non-negative, got {value}")
        return cls(tuple(str(int(value)) for value in components))

    @classmethod
    def from_numeric(cls, value: Sequence[int] | None) -> Version:
        """Adapt a major.minor.build.revision identifier.

        Components are clamped into ``[0, MAX_COMPONENT]``, so an undefined
        ``-1`` component reads as ``0``.
        """
        if value is None:
            raise MissingArgumentError("value must not be None")
        parts = [int(part) for part in value]
        if len(parts) > 4:
            raise ComponentOutOfRangeError(f"expected at most 4 components, got {len(parts)}")
        return cls(tuple(str(min(max(part, 0), MAX_COMPONENT)) for part in parts))

    @property
    def major(self) -> str:
        return self.release[0] if len(self.release) > 0 else "0"

    @property
    def minor(self) -> str:
        return self.release[1] if len(self.release) > 1 else "0"

    @property
    def patch(self) -> str:
        return self.release[2] if len(self.release) > 2 else "0"

    @property
    def kind(self) -> ReleaseKind:
        if not self.pre_release:
            return ReleaseKind.RELEASE
        text = self.pre_release[0].lower()
        if any(marker in text for marker in _CANDIDATE_MARKERS):
            return ReleaseKind.RELEASE_CANDIDATE
        if "beta" in text:
            return ReleaseKind.BETA
        if "alpha" in text:
            return ReleaseKind.ALPHA
        return ReleaseKind.UNKNOWN

    @property
    def is_well_formed(self) -> bool:
        return (
            len(self.release) <= 3
            and all(_is_digits(item) for item in self.release)
            and all(_is_alphanumeric(item) for item in self.pre_release)
            and _is_alphanumeric(self.metadata)
        )

    def format(self, spec: str | None = None, *, settings: VersionSettings | None = None) -> str:
        """Render the version; ``spec`` combines the flags R, P and M (any case)."""
        if spec is None or not spec.strip():
            spec = resolve_settings(settings).default_format
        flags = spec.upper()

        out = ""
        if "R" in flags:
            out = _format_release(self.release)
        if "P" in flags and self.pre_release:
            if out:
                out += "-"
            out += ".".join(self.pre_release)
        if "M" in flags and self.metadata:
            if out:
                out += "+"
            out += self.metadata
        return out

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Comparison.DEFAULT.equals(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not Comparison.DEFAULT.equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Comparison.DEFAULT.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Comparison.DEFAULT.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Comparison.DEFAULT.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return Comparison.DEFAULT.compare(self, other) >= 0

    def __hash__(self) -> int:
        return Comparison.DEFAULT.hash(self)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_version,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _format_version, return_schema=core_schema.str_schema(), when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string"}


NONE = Version(())
Version.NONE = NONE


def _strip_prefix(text: str, prefixes: Iterable[str]) -> str:
    for prefix in prefixes:
        if text.startswith(prefix) and len(text) > len(prefix) and text[len(prefix)].isspace():
            logger.debug("stripping version prefix %r", prefix)
            return text[len(prefix) :]
    return text


def _scan(text: str) -> tuple[list[str], list[str], str]:
    """Split ``text`` into raw release tokens, pre-release tokens and metadata."""
    release: list[str] = []
    pre_release: list[str] = []
    state = _ScanState.RELEASE
    start = 0

    for i, ch in enumerate(text):
        target = release if state is _ScanState.RELEASE else pre_release
        if ch == "+":
            target.append(text[start:i])
            return release, pre_release, text[i + 1 :]
        if ch == "-" and state is _ScanState.RELEASE:
            release.append(text[start:i])
            state = _ScanState.PRE_RELEASE
            start = i + 1
        elif ch == ".":
            target.append(text[start:i])
            start = i + 1

    target = release if state is _ScanState.RELEASE else pre_release
    target.append(text[start:])
    return release, pre_release, ""


def parse(raw: str | None, *, settings: VersionSettings | None = None) -> Version:
    if raw is None:
        raise VersionFormatError("Not a valid semantic version")
    settings = resolve_settings(settings)

    text = _strip_prefix(str(raw).lstrip(), settings.known_prefixes).strip()
    if not text:
        raise VersionFormatError("Not a valid semantic version", text=str(raw))

    release, pre_release, metadata = _scan(text)
    return Version(tuple(release), tuple(pre_release), metadata)


def try_parse(raw: str | None, *, settings: VersionSettings | None = None) -> tuple[Version, bool]:
    try:
        return parse(raw, settings=settings), True
    except VersionFormatError as exc:
        logger.debug("rejected version text: %s", exc)
        return NONE, False


def _coerce_version(value: object) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return parse(value)
    raise ValueError(f"expected a version string, got {type(value).__name__}")


def _format_version(value: Version) -> str:
    return value.format()
