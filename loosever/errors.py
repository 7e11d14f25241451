from __future__ import annotations


class VersionError(Exception):
    pass


class VersionFormatError(VersionError, ValueError):
    def __init__(self, message: str, *, text: str | None = None) -> None:
        self.text = text
        suffix = ""
        if text is not None:
            suffix = f": {text!r}"
        super().__init__(str(message) + suffix)


class ComponentOutOfRangeError(VersionError, ValueError):
    pass


class MissingArgumentError(VersionError, TypeError):
    pass
