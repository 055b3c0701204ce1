"""Spelling out decimal numbers with the words of a number dictionary."""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from numwords.dictionary import DictEntry

_DIGITS = frozenset("0123456789")


def is_valid_number(text: str) -> bool:
    """Return True if ``text`` consists of ASCII digits only."""
    return all(char in _DIGITS for char in text)


def power_key(index: int) -> str:
    """Return the dictionary key for ten to the power ``index``."""
    return "1" + "0" * index


def _table(entries: Sequence[DictEntry]) -> dict[str, str]:
    table: dict[str, str] = {}
    for entry in entries:
        table.setdefault(entry.key, entry.value)
    return table


def _word(table: Mapping[str, str], key: str) -> Iterator[str]:
    value = table.get(key)
    if value is not None:
        yield value


def _digit(table: Mapping[str, str], digit: str) -> Iterator[str]:
    if digit != "0":
        yield from _word(table, digit)


def _pair(table: Mapping[str, str], tens: str, units: str) -> Iterator[str]:
    if tens == "0":
        yield from _digit(table, units)
        return
    whole = table.get(tens + units)
    if whole is not None:
        yield whole
        return
    yield from _word(table, tens + "0")
    yield from _digit(table, units)


def _triple(table: Mapping[str, str], group: str) -> Iterator[str]:
    hundreds, tens, units = group
    if hundreds != "0":
        yield from _digit(table, hundreds)
        yield from _word(table, power_key(2))
    if tens != "0" or units != "0":
        yield from _pair(table, tens, units)


def _words(table: Mapping[str, str], number: str) -> Iterator[str]:
    size = len(number)
    lead = size % 3
    if lead:
        head = number[:lead]
        if head.strip("0"):
            if lead == 1:
                yield from _digit(table, head)
            else:
                yield from _pair(table, head[0], head[1])
            if size - lead > 0:
                yield from _word(table, power_key(size - lead))
    for start in range(lead, size, 3):
        group = number[start:start + 3]
        if group != "000":
            yield from _triple(table, group)
            remaining = size - start - 3
            if remaining > 0:
                yield from _word(table, power_key(remaining))


def convert_number_to_words(number: str, entries: Sequence[DictEntry]) -> str:
    """Spell ``number`` using the dictionary ``entries``.

    A number that is itself a key gives that entry's value ("100" gives
    "one " before it). Otherwise each word found is followed by one space;
    words missing from the dictionary are left out. The text printed for the
    number is the result followed by a newline.
    """
    if not is_valid_number(number):
        raise ValueError(f"not a non-negative decimal number: {number!r}")
    table = _table(entries)
    whole = table.get(number)
    if whole is not None:
        return ("one " if number == "100" else "") + whole
    return "".join(f"{word} " for word in _words(table, number))