from __future__ import annotations

import logging

from loosever.comparison import Comparison, compare_items
from loosever.config import DEFAULT_SETTINGS, KNOWN_PREFIXES, VersionSettings
from loosever.errors import (
    ComponentOutOfRangeError,
    MissingArgumentError,
    VersionError,
    VersionFormatError,
)
from loosever.jsonconv import VersionAdapter, deserialize, serialize
from loosever.version import NONE, ReleaseKind, Version, compress_list, parse, trim_item, try_parse

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Values
    "Version",
    "ReleaseKind",
    "NONE",
    # Parsing
    "parse",
    "try_parse",
    "trim_item",
    "compress_list",
    # Ordering
    "Comparison",
    "compare_items",
    # Settings
    "VersionSettings",
    "DEFAULT_SETTINGS",
    "KNOWN_PREFIXES",
    # JSON
    "VersionAdapter",
    "serialize",
    "deserialize",
    # Errors
    "VersionError",
    "VersionFormatError",
    "ComponentOutOfRangeError",
    "MissingArgumentError",
]

__version__ = "0.1.0"
