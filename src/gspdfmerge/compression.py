from __future__ import annotations
from enum import Enum

from .errors import InvalidArgument


class CompressionPreset(Enum):
    """
    Ghostscript -dPDFSETTINGS presets.

    Each value is the token forwarded verbatim to the tool. NONE carries an
    empty token and means "emit no -dPDFSETTINGS flag at all".
    """

    NONE = ""
    SCREEN = "/screen"
    EBOOK = "/ebook"
    PRINTER = "/printer"
    PREPRESS = "/prepress"
    DEFAULT = "/default"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def all(cls) -> list["CompressionPreset"]:
        """Return every supported preset, in declaration order."""
        return list(cls)

    @classmethod
    def names(cls) -> list[str]:
        return [p.name.lower() for p in cls]

    @classmethod
    def parse(cls, value) -> "CompressionPreset":
        """
        Accept a preset member, its lowercase name ("ebook") or its raw
        token ("/ebook"). Anything else is rejected.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for p in cls:
                if key.lower() == p.name.lower() or key == p.value:
                    return p
        raise InvalidArgument(f"Invalid compression level: {value!r}")
