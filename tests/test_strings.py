import pytest

from minitalk.strings import (
    compare,
    compare_bytes,
    find_byte,
    find_first,
    find_last,
    find_within,
    map_indexed,
    split_words,
    substring,
    trim,
)


def test_find_byte_outside_range_is_none():
    assert find_byte(b"salut", ord("l"), 1) is None


def test_find_byte_within_range():
    assert find_byte(b"salut", ord("l"), 5) == 2
    assert find_byte(b"salut", b"t", 5) == 4


def test_find_byte_wraps_to_unsigned():
    assert find_byte(b"a\xffb", -1, 3) == 1


def test_find_byte_count_too_large():
    with pytest.raises(ValueError):
        find_byte(b"ab", ord("a"), 3)


def test_compare_bytes_equal():
    assert compare_bytes(b"hello", b"hello", 5) == 0


def test_compare_bytes_sign_and_zero_count():
    assert compare_bytes(b"abc", b"abd", 3) < 0
    assert compare_bytes(b"abd", b"abc", 3) > 0
    assert compare_bytes(b"x", b"y", 0) == 0


def test_compare_bytes_count_too_large():
    with pytest.raises(ValueError):
        compare_bytes(b"a", b"ab", 2)


def test_compare_high_byte_against_terminator():
    assert compare("test\x80", "test\0", 6) == 128


def test_compare_ordering():
    assert compare("helho", "hello", 6) < 0
    assert compare("hello", "helho", 6) > 0
    assert compare("hello", "hello", 6) == 0


def test_compare_limited_length():
    assert compare("abcX", "abcY", 3) == 0
    assert compare("anything", "else", 0) == 0


def test_compare_is_antisymmetric():
    pairs = [("abc", "abd"), ("a", "abc"), ("zz", "z")]
    for a, b in pairs:
        assert compare(a, b, 10) == -compare(b, a, 10)


def test_find_first():
    assert find_first("salut", "l") == 2
    assert find_first("salut", "x") is None


def test_find_first_nul_is_end():
    assert find_first("salut", 0) == len("salut")


def test_find_last():
    assert find_last("coucou", "o") == 4
    assert find_last("coucou", "z") is None
    assert find_last("coucou", 0) == len("coucou")


def test_find_first_and_last_agree_on_single_occurrence():
    assert find_first("abcdef", "d") == find_last("abcdef", "d")


def test_find_within():
    assert find_within("coucou ca va ?", "ca", 14) == 7


def test_find_within_respects_length():
    assert find_within("coucou ca va ?", "ca", 8) is None
    assert find_within("coucou ca va ?", "ca", 9) == 7


def test_find_within_empty_needle():
    assert find_within("abc", "", 0) == 0


def test_split_words():
    assert split_words("coucouzcazva", "z") == ["coucou", "ca", "va"]


def test_split_words_drops_empty_pieces():
    assert split_words("zzazzbz", "z") == ["a", "b"]
    assert split_words("zzz", "z") == []


def test_split_words_rejoin_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split_words(" ".join(words), " ") == words


def test_trim_all_removed():
    assert trim("...--...", ".-") == ""


def test_trim_keeps_inner_characters():
    assert trim("..a.b..", ".") == "a.b"


def test_trim_without_charset():
    assert trim("  x  ", None) == "  x  "


def test_substring():
    assert substring("coucou ca va ?", 7, 6) == "ca va "


def test_substring_past_end():
    assert substring("abc", 10, 2) == ""
    assert substring("abc", 1, 100) == "bc"


def test_substring_negative_rejected():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_map_indexed():
    result = map_indexed("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_map_indexed_preserves_length():
    text = "hello world"
    assert len(map_indexed(text, lambda i, ch: "x")) == len(text)