# numwords

Spell out a non-negative integer in words, using a dictionary file that maps
numbers to their names.

## The dictionary

A dictionary is a plain text file of `key: value` entries:

```
0: zero
1: one
2: two
...
20: twenty
30: thirty
...
100: hundred
1000: thousand
1000000: million
```

How the file is read:

- A key runs from the first non-blank character up to the next colon, even
  across line breaks; a value runs from that colon to the end of its line.
- Spaces, tabs and newlines around keys and values are trimmed. Entries whose
  key or value is empty after trimming are dropped.
- Reading stops at the first stretch of text that has no colon left in it,
  and after 1000 entries (`MAX_DICT_SIZE`).
- Only the first 9999 bytes of the file are used (`BUF_SIZE - 1`), and the
  text ends at the first NUL byte.
- When a key appears more than once, the first entry wins.

By default the command reads `numbers.dict` from the current directory.

## Command line

```
numwords 42
numwords 1234567 my_numbers.dict
```

The first argument is the number and must contain only the digits `0`–`9`.
The optional second argument is the dictionary file to use. If the
dictionary cannot be read or the number is not valid, `Error` is printed and
the command exits with status 1. With no arguments it exits with status 1
and prints nothing. Otherwise the words are printed on one line and the
status is 0.

## How numbers are spelled

- If the whole number is itself a key, its value is used as is; for `100`
  the result is `one ` followed by the value (e.g. `one hundred`).
- Otherwise the digits are taken in groups of three from the right. Each
  group is spelled with the unit, tens (`20`, `30`, …), two-digit (`11`,
  `15`, …) and `100` entries, followed by the power-of-ten key for its
  position (`1000`, `1000000`, …). All-zero groups are skipped.
- Every word is followed by one space. Words whose key is missing from the
  dictionary are simply left out.

## Library

```python
from numwords.dictionary import parse_dict, load_dict, lookup, format_dict
from numwords.convert import convert_number_to_words, is_valid_number, power_key

entries = load_dict("numbers.dict")
print(convert_number_to_words("42", entries))
```

- `parse_dict(text)` turns dictionary text into a list of `DictEntry`
  objects (frozen dataclasses with `key` and `value`).
- `load_dict(path)` reads and parses a dictionary file. It raises
  `DictionaryError` if the file cannot be read.
- `lookup(entries, key)` returns the value of the first entry with that key,
  or `None`.
- `format_dict(entries)` renders the entries as `Key: ..., Value: ...` lines.
- `is_valid_number(text)` tells whether a string holds only the digits
  `0`–`9`.
- `power_key(index)` gives the dictionary key for ten to the power `index`,
  for example `"1000"` for `3`.
- `convert_number_to_words(number, entries)` returns the words for a string
  of digits; it raises `ValueError` for anything else.

## What it does not do

There is no handling of negative numbers, fractions, ordinals or
conjunctions such as "and", and no grammar beyond concatenating dictionary
words. The wording depends entirely on the dictionary you supply; none is
bundled with the package.