from __future__ import annotations

import functools
import string
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from loosever.version import Version

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def is_numeric(token: str) -> bool:
    return bool(token) and token.isascii() and token.isdigit()


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def compare_items(left: str | None, right: str | None) -> int:
    """Three-way comparison of two normalized tokens.

    Blank tokens count as ``"0"``. Numerals sort before anything else; two
    numerals compare by digit count first, which is only correct because
    normalization already stripped their leading zeros. Other tokens compare
    ASCII-case-insensitively with an ordinal tie-break.
    """
    left = left if left and left.strip() else "0"
    right = right if right and right.strip() else "0"

    left_numeric = is_numeric(left)
    right_numeric = is_numeric(right)
    if left_numeric and right_numeric:
        return _sign(len(left), len(right)) or _sign(left, right)
    if left_numeric:
        return -1
    if right_numeric:
        return 1

    return _sign(left.translate(_ASCII_UPPER), right.translate(_ASCII_UPPER)) or _sign(left, right)


def _compare_sequences(left: tuple[str, ...], right: tuple[str, ...], length: int) -> int:
    for i in range(length):
        left_item = left[i] if i < len(left) else None
        right_item = right[i] if i < len(right) else None
        result = compare_items(left_item, right_item)
        if result:
            return result
    return 0


def _compare_release(left: Version, right: Version) -> int:
    return _compare_sequences(left.release, right.release, max(len(left.release), len(right.release)))


def _compare_pre_release_presence(left: Version, right: Version) -> int:
    # A version carrying a pre-release sorts below the same release without one.
    if not left.pre_release and right.pre_release:
        return 1
    if left.pre_release and not right.pre_release:
        return -1
    return 0


def _release_only(left: Version, right: Version) -> int:
    return _compare_release(left, right)


def _release_top_three(left: Version, right: Version) -> int:
    return _compare_sequences(left.release, right.release, 3)


def _release(left: Version, right: Version) -> int:
    return _compare_release(left, right) or _compare_pre_release_presence(left, right)


def _pre_release(left: Version, right: Version) -> int:
    return _release(left, right) or _compare_sequences(
        left.pre_release,
        right.pre_release,
        max(len(left.pre_release), len(right.pre_release)),
    )


def _full(left: Version, right: Version) -> int:
    return _pre_release(left, right) or _sign(left.metadata, right.metadata)


class Comparison(str, Enum):
    """Named orderings over versions.

    Every member is a total order whose equality is ``compare(a, b) == 0``.
    ``DEFAULT`` is an alias of ``FULL`` and ``STANDARD`` of ``PRE_RELEASE``.
    """

    FULL = "full"
    PRE_RELEASE = "pre_release"
    RELEASE = "release"
    RELEASE_ONLY = "release_only"
    RELEASE_TOP_THREE = "release_top_three"

    DEFAULT = "full"
    STANDARD = "pre_release"

    def compare(self, left: Version | None, right: Version | None) -> int:
        """Return -1, 0 or 1; ``None`` sorts before every version."""
        if left is right:
            return 0
        if left is None:
            return -1
        if right is None:
            return 1
        return _STRATEGIES[self](left, right)

    def equals(self, left: Version | None, right: Version | None) -> bool:
        return self.compare(left, right) == 0

    def hash(self, value: Version | None) -> int:
        """Hash shared by every member, built from the first three release tokens.

        This is coarser than equality on purpose: versions that differ only
        past the patch component, or in pre-release or metadata, collide.
        Blank tokens hash as ``"0"`` to agree with ``compare_items``.
        """
        if value is None:
            return 0
        return hash(tuple(item or "0" for item in value.release[:3]))

    def key(self) -> Callable[[Version | None], Any]:
        return functools.cmp_to_key(self.compare)

    def sort(self, versions: Iterable[Version], *, reverse: bool = False) -> list[Version]:
        return sorted(versions, key=self.key(), reverse=reverse)


_STRATEGIES: dict[Comparison, Callable[[Version, Version], int]] = {
    Comparison.FULL: _full,
    Comparison.PRE_RELEASE: _pre_release,
    Comparison.RELEASE: _release,
    Comparison.RELEASE_ONLY: _release_only,
    Comparison.RELEASE_TOP_THREE: _release_top_three,
}
