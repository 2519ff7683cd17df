"""Pesticide records: the fixed-size file format and the per-user pesticide directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

NAME_SIZE = 10
PERIOD_SIZE = 10
STYLE_SIZE = 20
RECORD_SIZE = NAME_SIZE + PERIOD_SIZE + STYLE_SIZE

PEST_STYLES = ("LOCUST", "LADYBUG")
DIRECTORY_NAME = "PESTICIDE"
FILE_SUFFIX = ".dat"
# The file browser keeps at most this many names.
MAX_LISTED = 20


def validate_period(period: str) -> str:
    """Return the spraying period if it is made of decimal digits only."""
    if any(not "0" <= ch <= "9" for ch in period):
        raise ValueError("PLEASE INPUT THE NUMBER!")
    return period


def _pack(text: str, size: int) -> bytes:
    raw = text.encode("latin-1")
    if len(raw) >= size:
        raise ValueError(f"{text!r} is longer than {size - 1} characters")
    return raw.ljust(size, b"\0")


def _unpack(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


@dataclass
class Pesticide:
    """A pesticide's name, spraying period and the pest it targets."""

    name: str = ""
    period: str = ""
    pest_style: str = ""

    def to_bytes(self) -> bytes:
        """The fixed-size record stored in a pesticide file."""
        return (
            _pack(self.name, NAME_SIZE)
            + _pack(self.period, PERIOD_SIZE)
            + _pack(self.pest_style, STYLE_SIZE)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Pesticide":
        """Read a record written by to_bytes."""
        if len(data) < RECORD_SIZE:
            raise ValueError(f"a pesticide record needs {RECORD_SIZE} bytes, got {len(data)}")
        period_end = NAME_SIZE + PERIOD_SIZE
        return cls(
            _unpack(data[:NAME_SIZE]),
            _unpack(data[NAME_SIZE:period_end]),
            _unpack(data[period_end:RECORD_SIZE]),
        )

    def is_complete(self) -> bool:
        """Whether every field has been filled in."""
        return bool(self.name and self.period and self.pest_style)


class PesticideStore:
    """Pesticide files of one user, kept in the user's PESTICIDE directory."""

    def __init__(self, root: str | Path, username: str) -> None:
        self.directory = Path(root) / username / DIRECTORY_NAME
        # The user's own directory must already exist.
        self.directory.mkdir(exist_ok=True)

    def load(self, filename: str) -> Pesticide:
        """Read the pesticide stored in `filename` within the directory."""
        return Pesticide.from_bytes((self.directory / filename).read_bytes())

    def save(self, pesticide: Pesticide) -> Path:
        """Write a complete pesticide to `<name>.dat` and return the file's path."""
        if not pesticide.is_complete():
            raise ValueError("PLEASE FILL ALL BLANK!")
        validate_period(pesticide.period)
        path = self.directory / (pesticide.name + FILE_SUFFIX)
        path.write_bytes(pesticide.to_bytes())
        return path

    def list_files(self) -> list[str]:
        """Names of the files in the directory, sorted, at most MAX_LISTED."""
        names = sorted(p.name for p in self.directory.iterdir() if p.is_file())
        return names[:MAX_LISTED]