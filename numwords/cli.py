"""Command line entry point: spell a number with the words of a dictionary."""

from __future__ import annotations

import sys
from typing import Sequence

from numwords.convert import convert_number_to_words, is_valid_number
from numwords.dictionary import DictionaryError, load_dict

DEFAULT_DICT = "numbers.dict"
"""Dictionary file used when none is named on the command line."""

_ERROR = "Error\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status.

    ``argv`` holds the arguments after the program name: the number, then
    optionally the dictionary file. Without a number nothing is printed and
    the status is 1. An unreadable dictionary or a number that is not made
    of digits prints ``Error`` and gives status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    number = args[0]
    path = args[1] if len(args) > 1 else DEFAULT_DICT
    try:
        entries = load_dict(path)
    except DictionaryError:
        sys.stdout.write(_ERROR)
        return 1
    if not is_valid_number(number):
        sys.stdout.write(_ERROR)
        return 1
    sys.stdout.write(convert_number_to_words(number, entries) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())