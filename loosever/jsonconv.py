"""JSON adapter for versions.

A version travels as a single JSON string: reading parses it, writing emits
``str(version)``. Both directions go through pydantic, so ``Version`` can also
be used directly as a ``BaseModel`` field type.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from loosever.errors import MissingArgumentError
from loosever.version import Version

VersionAdapter: TypeAdapter[Version] = TypeAdapter(Version)


def serialize(version: Version) -> str:
    if version is None:
        raise MissingArgumentError("version must not be None")
    return VersionAdapter.dump_json(version).decode("utf-8")


def deserialize(text: str | bytes) -> Version:
    return VersionAdapter.validate_json(text)
