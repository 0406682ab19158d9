import pytest

from curler.utils import char_to_hex, split_string, url_decode, url_encode


def test_char_to_hex_from_character():
    assert char_to_hex("A") == "41"


def test_char_to_hex_from_int():
    assert char_to_hex(255) == "FF"
    assert char_to_hex(0) == "00"


@pytest.mark.parametrize("bad", ["", "ab", 256, -1, "\u0100"])
def test_char_to_hex_rejects(bad):
    with pytest.raises(ValueError):
        char_to_hex(bad)


def test_char_to_hex_parses_back():
    for value in range(256):
        assert int(char_to_hex(value), 16) == value


def test_url_encode_space_becomes_plus():
    assert url_encode("a b c") == "a+b+c"


def test_url_encode_keeps_safe_characters():
    safe = "AZaz09-_.!~*'()&=/\\?"
    assert url_encode(safe) == safe


def test_url_encode_utf8():
    assert url_encode("\u00e9") == "%C3%A9"


def test_url_encode_escapes_plus_and_percent():
    encoded = url_encode("+%")
    assert "+" not in encoded
    assert encoded.count("%") == 2


@pytest.mark.parametrize(
    "text",
    ["hello world", "a+b=c&d", "100% sure", "\u00e9t\u00e9 \u2603", "", "~/path?x=1"],
)
def test_round_trip_with_trailing_character(text):
    assert url_decode(url_encode(text) + "x") == text + "x"


def test_url_decode_plus_is_space():
    assert url_decode("a+b") == "a b"


def test_url_decode_keeps_invalid_escape():
    assert url_decode("%zz1") == "%zz1"
    assert url_decode("%") == "%"


def test_url_decode_lower_case_hex():
    assert url_decode("%2fa") == "/a"


def test_split_string_drops_empty_pieces():
    assert split_string("a;;b;", ";") == ["a", "b"]


def test_split_string_multi_character_delimiter():
    assert split_string("one, two, , three", ", ") == ["one", "two", "three"]


def test_split_string_empty_delimiter():
    assert split_string("abc", "") == []


def test_split_string_without_delimiter():
    assert split_string("abc", ";") == ["abc"]
    assert split_string("", ";") == []


def test_split_string_pieces_rejoin_to_text_without_empties():
    text = "x;y;;z"
    pieces = split_string(text, ";")
    assert ";".join(pieces) == text.replace(";;", ";")
    assert all(pieces)