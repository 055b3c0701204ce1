import pytest

from numwords.dictionary import (
    BUF_SIZE,
    MAX_DICT_SIZE,
    DictEntry,
    DictionaryError,
    format_dict,
    load_dict,
    lookup,
    parse_dict,
)


def test_parse_simple_lines():
    entries = parse_dict("1: one\n2: two\n")
    assert entries == [DictEntry("1", "one"), DictEntry("2", "two")]


def test_parse_trims_spaces_and_tabs():
    entries = parse_dict("  10 \t:   ten  \t\n\n\n20:twenty")
    assert entries == [DictEntry("10", "ten"), DictEntry("20", "twenty")]


def test_parse_skips_empty_key_or_value():
    entries = parse_dict(":x\n3:\n4: four\n")
    assert entries == [DictEntry("4", "four")]


def test_parse_key_spans_lines_without_colon():
    entries = parse_dict("abc\n5: five\n")
    assert entries == [DictEntry("abc\n5", "five")]


def test_parse_value_keeps_later_colons():
    entries = parse_dict("6: six: extra\n")
    assert entries == [DictEntry("6", "six: extra")]


def test_parse_keeps_carriage_return():
    entries = parse_dict("7: seven\r\n")
    assert entries == [DictEntry("7", "seven\r")]


def test_parse_stops_at_text_without_colon():
    entries = parse_dict("8: eight\ntrailing words")
    assert entries == [DictEntry("8", "eight")]


def test_parse_empty_text():
    assert parse_dict("") == []
    assert parse_dict(" \n\t ") == []


def test_parse_limits_entry_count():
    text = "".join(f"{n}: word{n}\n" for n in range(MAX_DICT_SIZE + 5))
    entries = parse_dict(text)
    assert len(entries) == MAX_DICT_SIZE
    assert entries[-1] == DictEntry(str(MAX_DICT_SIZE - 1), f"word{MAX_DICT_SIZE - 1}")


def test_load_dict_round_trip(tmp_path):
    text = "0: zero\n1: one\n100: hundred\n"
    path = tmp_path / "numbers.dict"
    path.write_text(text)
    assert load_dict(path) == parse_dict(text)
    assert load_dict(str(path))[2] == DictEntry("100", "hundred")


def test_load_dict_missing_file(tmp_path):
    with pytest.raises(DictionaryError):
        load_dict(tmp_path / "absent.dict")


def test_load_dict_reads_only_buffer(tmp_path):
    text = "".join(f"{n}: value number {n}\n" for n in range(800))
    assert len(text) > BUF_SIZE
    path = tmp_path / "big.dict"
    path.write_text(text)
    assert load_dict(path) == parse_dict(text[: BUF_SIZE - 1])


def test_load_dict_stops_at_nul(tmp_path):
    path = tmp_path / "nul.dict"
    path.write_bytes(b"1: one\n\x002: two\n")
    assert load_dict(path) == [DictEntry("1", "one")]


def test_format_dict():
    entries = [DictEntry("1", "one"), DictEntry("2", "two")]
    assert format_dict(entries) == "Key: 1, Value: one\nKey: 2, Value: two\n"
    assert format_dict([]) == ""


def test_lookup_first_match_wins():
    entries = parse_dict("1: one\n1: uno\n2: two\n")
    assert lookup(entries, "1") == "one"
    assert lookup(entries, "2") == "two"
    assert lookup(entries, "3") is None