import pytest

from algosuite.strings import (
    can_construct,
    first_uniq_char,
    is_chain,
    length_of_longest_substring,
    longest_common_subsequence,
    longest_str_chain,
    remove_palindrome_sub,
    repeated_character,
    reverse_str,
    reverse_words,
    robot_with_string,
    roman_to_int,
    seconds_to_remove_occurrences,
    smallest_number,
    unique_morse_representations,
    valid_utf8,
)


def test_roman_single_symbols():
    assert roman_to_int("I") == 1
    assert roman_to_int("M") == 1000


def test_roman_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_subtractive_and_additive_relations():
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")
    assert roman_to_int("VI") == roman_to_int("V") + roman_to_int("I")
    assert roman_to_int("MM") == 2 * roman_to_int("M")


def test_remove_palindrome_sub():
    assert remove_palindrome_sub("") == 0
    assert remove_palindrome_sub("abba") == 1
    assert remove_palindrome_sub("ab") == 2


@pytest.mark.parametrize("a,b", [("abcde", "ace"), ("xyz", "zyx"), ("", "abc")])
def test_lcs_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert 0 <= result <= min(len(a), len(b))


def test_lcs_identity_and_disjoint():
    assert longest_common_subsequence("abcde", "abcde") == len("abcde")
    assert longest_common_subsequence("abc", "def") == 0
    assert longest_common_subsequence("abc", "xaybzc") == len("abc")


def test_repeated_character():
    assert repeated_character("abcab") == "a"
    assert repeated_character("abcdb") == "b"
    assert repeated_character("abc") is None


@pytest.mark.parametrize("pattern", ["", "I", "D", "IIIDIDDD", "DDD", "IDID"])
def test_smallest_number_satisfies_pattern(pattern):
    result = smallest_number(pattern)
    assert sorted(result) == [chr(ord("1") + i) for i in range(len(pattern) + 1)]
    for op, (a, b) in zip(pattern, zip(result, result[1:])):
        assert (a < b) if op == "I" else (a > b)


def test_smallest_number_increasing_is_sorted():
    result = smallest_number("III")
    assert list(result) == sorted(result)


def test_seconds_to_remove_occurrences():
    assert seconds_to_remove_occurrences("111000") == 0
    assert seconds_to_remove_occurrences("00000") == 0
    assert seconds_to_remove_occurrences("0" * 5 + "1") == 5


@pytest.mark.parametrize("s", ["zza", "bac", "bdda", "abc", "cba"])
def test_robot_with_string_is_permutation_and_not_larger(s):
    result = robot_with_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s


def test_robot_with_string_sorted_input_unchanged():
    assert robot_with_string("abcz") == "abcz"


def test_length_of_longest_substring():
    assert length_of_longest_substring("") == 0
    assert length_of_longest_substring("aaaa") == 1
    assert length_of_longest_substring("abcdef") == len("abcdef")
    assert length_of_longest_substring("abcabcbb") == 3


def test_can_construct():
    assert can_construct("a", "b") is False
    assert can_construct("aa", "ab") is False
    assert can_construct("aa", "aab") is True


def test_first_uniq_char():
    assert first_uniq_char("aabb") == -1
    assert first_uniq_char("xaa") == 0
    s = "aabbc"
    assert s[first_uniq_char(s)] == "c"


def test_valid_utf8_round_trip():
    encoded = list("h\u00e9llo \u20ac \U0001d11e".encode("utf-8"))
    assert valid_utf8(encoded) is True
    assert valid_utf8(encoded[:-1]) is False


def test_valid_utf8_rejects_bad_bytes():
    assert valid_utf8([0x80]) is False
    assert valid_utf8([0xFF]) is False
    assert valid_utf8([0xC3, 0x41]) is False
    assert valid_utf8([]) is True


@pytest.mark.parametrize("s,k", [("abcdefg", 2), ("abcd", 3), ("a", 1), ("", 2)])
def test_reverse_str_is_involution(s, k):
    assert reverse_str(reverse_str(s, k), k) == s


def test_reverse_str_large_k_reverses_all():
    assert reverse_str("abcde", 10) == "abcde"[::-1]


def test_reverse_str_rejects_non_positive_k():
    with pytest.raises(ValueError):
        reverse_str("abc", 0)


def test_reverse_words():
    s = "Let's take  contest"
    result = reverse_words(s)
    assert reverse_words(result) == s
    assert result.split(" ")[0] == "Let's"[::-1]
    assert len(result) == len(s)


def test_unique_morse_representations():
    assert unique_morse_representations([]) == 0
    assert unique_morse_representations(["abc", "abc"]) == 1
    assert unique_morse_representations(["gin", "zen", "gig", "msg"]) == 2


def test_unique_morse_rejects_non_letters():
    with pytest.raises(ValueError):
        unique_morse_representations(["Abc"])


def test_is_chain():
    assert is_chain("ab", "abc") is True
    assert is_chain("ab", "acb") is True
    assert is_chain("ab", "xab") is True
    assert is_chain("ab", "ba") is False
    assert is_chain("ab", "xyz") is False
    assert is_chain("a", "a") is False


def test_longest_str_chain():
    words = ["a", "b", "ba", "bca", "bda", "bdca"]
    assert longest_str_chain(words) == 4
    assert longest_str_chain(list(reversed(words))) == longest_str_chain(words)


def test_longest_str_chain_full_chain_and_none():
    chain = ["abcd", "a", "abc", "ab"]
    assert longest_str_chain(chain) == len(chain)
    assert longest_str_chain(["abcd", "dbqca"]) == 1