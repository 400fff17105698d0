import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.cstr import (
    atoi,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)

# Text without NUL characters: a whole C string.
plain_text = st.text(alphabet=st.characters(min_codepoint=1))
ascii_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))
sizes = st.integers(min_value=0, max_value=64)


# strlen

@given(plain_text)
def test_strlen_counts_all_characters_without_nul(s):
    assert strlen(s) == len(s)


@given(plain_text, plain_text)
def test_strlen_stops_at_nul(head, tail):
    assert strlen(head + "\0" + tail) == len(head)


def test_strlen_rejects_non_string():
    with pytest.raises(TypeError):
        strlen(b"abc")


# strchr / strrchr

@given(plain_text.filter(bool), st.data())
def test_strchr_finds_first_occurrence(s, data):
    ch = data.draw(st.sampled_from(s))
    index = strchr(s, ch)
    assert s[index] == ch
    assert ch not in s[:index]


@given(plain_text.filter(bool), st.data())
def test_strrchr_finds_last_occurrence(s, data):
    ch = data.draw(st.sampled_from(s))
    index = strrchr(s, ch)
    assert s[index] == ch
    assert ch not in s[index + 1:]


@given(plain_text)
def test_search_for_nul_finds_terminator(s):
    assert strchr(s, "\0") == len(s)
    assert strrchr(s, 0) == len(s)


def test_int_search_code_is_cut_to_a_byte():
    assert strchr("abc", ord("b") + 256) == 1
    assert strrchr("abc", 256) == 3


def test_search_for_missing_character():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_search_ignores_text_after_nul():
    assert strchr("ab\0cd", "c") is None
    assert strrchr("ab\0ab", "b") == 1


def test_search_rejects_multi_character_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(TypeError):
        strrchr("abc", 1.5)


# strncmp

@given(plain_text)
def test_strncmp_equal_strings(s):
    assert strncmp(s, s, len(s) + 5) == 0


@given(plain_text, plain_text)
def test_strncmp_zero_length_is_always_equal(a, b):
    assert strncmp(a, b, 0) == 0


@given(ascii_text, ascii_text)
def test_strncmp_sign_follows_ordering(a, b):
    result = strncmp(a, b, max(len(a), len(b)) + 1)
    if a == b:
        assert result == 0
    elif a < b:
        assert result < 0
    else:
        assert result > 0


@given(plain_text, plain_text)
def test_strncmp_is_antisymmetric(a, b):
    n = max(len(a), len(b))
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strncmp_limits_comparison():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_compares_against_terminator():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_rejects_negative_size():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr

@given(plain_text, sizes)
def test_strnstr_empty_needle_is_found_at_start(haystack, n):
    assert strnstr(haystack, "", n) == 0


@given(plain_text, plain_text, plain_text)
def test_strnstr_finds_embedded_needle(prefix, needle, suffix):
    haystack = prefix + needle + suffix
    index = strnstr(haystack, needle, len(haystack))
    assert index is not None
    assert index <= len(prefix)
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_needle_must_fit_within_limit():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack) - 1) is None
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")


def test_strnstr_missing_needle():
    assert strnstr("hello", "xyz", 100) is None


# strlcpy

@given(plain_text, plain_text, sizes.filter(lambda n: n > 0))
def test_strlcpy_truncates_to_size(dst, src, size):
    text, length = strlcpy(dst, src, size)
    assert length == len(src)
    assert len(text) <= size - 1
    assert src.startswith(text)
    if len(src) < size:
        assert text == src


@given(plain_text, plain_text)
def test_strlcpy_zero_size_leaves_destination(dst, src):
    assert strlcpy(dst, src, 0) == (dst, len(src))


def test_strlcpy_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcpy("", "abc", -2)


# strlcat

@given(plain_text, plain_text, sizes)
def test_strlcat_concatenates_within_size(dst, src, size):
    text, length = strlcat(dst, src, size)
    if size <= len(dst):
        assert text == dst
        assert length == len(src) + size
    else:
        assert length == len(dst) + len(src)
        assert text.startswith(dst)
        assert (dst + src).startswith(text)
        assert len(text) == min(size - 1, len(dst) + len(src))


@given(plain_text, plain_text)
def test_strlcat_with_room_is_full_join(dst, src):
    assert strlcat(dst, src, len(dst) + len(src) + 1) == (dst + src, len(dst) + len(src))


def test_strlcat_reads_destination_up_to_nul():
    text, length = strlcat("ab\0zz", "cd", 10)
    assert text == "abcd"
    assert length == len("abcd")


# atoi

@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_atoi_round_trips_int_range(n):
    assert atoi(str(n)) == n


@given(st.integers(min_value=0, max_value=2**31 - 1), st.text(alphabet="\t\n\v\f\r "))
def test_atoi_skips_leading_whitespace_and_plus(n, space):
    assert atoi(space + "+" + str(n)) == n


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_atoi_stops_at_non_digit(n):
    assert atoi(f"{n}abc99") == n
    assert atoi(f"{n} 7") == n


def test_atoi_without_digits_is_zero():
    assert atoi("--5") == 0
    assert atoi("") == 0
    assert atoi("x12") == 0


def test_atoi_wraps_like_32_bit_int():
    assert atoi("2147483648") == -2147483648


# strdup

@given(plain_text)
def test_strdup_copies_string(s):
    assert strdup(s) == s


@given(plain_text, plain_text)
def test_strdup_stops_at_nul(head, tail):
    assert strdup(head + "\0" + tail) == head