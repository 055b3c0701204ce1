"""Loading and querying number dictionaries made of ``key: value`` lines."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence, Union

MAX_DICT_SIZE = 1000
"""Largest number of entries kept from one dictionary."""

BUF_SIZE = 10000
"""Size of the read buffer; at most ``BUF_SIZE - 1`` bytes of a file are used."""

_BLANKS = " \t\n"


@dataclass(frozen=True)
class DictEntry:
    """One ``key: value`` pair of a number dictionary."""

    key: str
    value: str


class DictionaryError(Exception):
    """Raised when a dictionary file cannot be read."""


def _trim(text: str) -> str:
    return text.strip(_BLANKS)


def parse_dict(text: str) -> list[DictEntry]:
    """Parse dictionary text into entries, in file order.

    A key runs up to the next colon (it may span lines), a value up to the
    end of its line. Spaces, tabs and newlines around both are dropped, and
    pairs whose key or value ends up empty are skipped. Parsing stops at the
    first stretch without a colon or after ``MAX_DICT_SIZE`` entries.
    """
    entries: list[DictEntry] = []
    pos = 0
    size = len(text)
    while pos < size and len(entries) < MAX_DICT_SIZE:
        while pos < size and text[pos] in _BLANKS:
            pos += 1
        if pos >= size:
            break
        colon = text.find(":", pos)
        if colon < 0:
            break
        key = _trim(text[pos:colon])
        end = text.find("\n", colon + 1)
        if end < 0:
            end = size
        value = _trim(text[colon + 1:end])
        if key and value:
            entries.append(DictEntry(key, value))
        pos = end + 1
    return entries


def load_dict(path: Union[str, "PathLike[str]"]) -> list[DictEntry]:
    """Read and parse a dictionary file.

    Only the first ``BUF_SIZE - 1`` bytes are read, and the text ends at the
    first NUL byte. Raises :class:`DictionaryError` if the file cannot be read.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read(BUF_SIZE - 1)
    except OSError as exc:
        raise DictionaryError(f"cannot read dictionary {path!s}") from exc
    raw = raw.split(b"\0", 1)[0]
    return parse_dict(raw.decode("utf-8", errors="replace"))


def format_dict(entries: Iterable[DictEntry]) -> str:
    """Render entries as ``Key: <key>, Value: <value>`` lines."""
    return "".join(f"Key: {entry.key}, Value: {entry.value}\n" for entry in entries)


def lookup(entries: Sequence[DictEntry], key: str) -> str | None:
    """Return the value of the first entry with exactly ``key``, or None."""
    return next((entry.value for entry in entries if entry.key == key), None)