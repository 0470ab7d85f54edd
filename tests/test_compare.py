import pytest

from forkunit.compare import strchr, strcmp, strncmp, strnstr, strrchr

WORDS = ["", "a", "ab", "abc", "abd", "b", "Hello", "World", "hello", "Hell"]


def _sign(x):
    return (x > 0) - (x < 0)


def test_strncmp_equal_case():
    assert strncmp("Hello", "Hello", 5) == 0


def test_strncmp_different_case():
    assert strncmp("Hello", "World", 5) < 0


def test_strcmp_equal():
    assert strcmp("Hello", "Hello") == 0
    assert strcmp("", "") == 0


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_strcmp_orders_like_python(a, b):
    assert _sign(strcmp(a, b)) == _sign((a > b) - (a < b))


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_strcmp_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)


def test_strcmp_prefix_difference_is_code_of_extra_char():
    assert strcmp("Hello", "Hell") == ord("o")
    assert strcmp("Hell", "Hello") == -ord("o")


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
@pytest.mark.parametrize("n", [0, 1, 2, 3, 10])
def test_strncmp_matches_truncated_strcmp(a, b, n):
    assert strncmp(a, b, n) == strcmp(a[:n], b[:n])


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strchr_finds_first():
    s = "hello"
    assert strchr(s, "l") == s.index("l")
    assert strchr(s, "z") is None


def test_strchr_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strrchr_finds_last():
    s = "hello"
    assert strrchr(s, "l") == s.rindex("l")
    assert strrchr(s, "q") is None
    assert strrchr(s, 0) == len(s)


def test_int_code_truncated_to_byte():
    assert strrchr("teste", 1125) == strrchr("teste", "e")
    assert strchr("teste", 1125) == strchr("teste", "e")


def test_search_char_validation():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(TypeError):
        strrchr("abc", 1.0)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_within_length():
    big = "lorem ipsum dolor"
    assert strnstr(big, "ipsum", len(big)) == big.index("ipsum")
    assert strnstr(big, "dolor", len(big)) == big.index("dolor")


def test_strnstr_length_limits_search():
    big = "lorem ipsum dolor"
    end = big.index("ipsum") + len("ipsum")
    assert strnstr(big, "ipsum", end) == big.index("ipsum")
    assert strnstr(big, "ipsum", end - 1) is None


def test_strnstr_short_length_or_missing():
    assert strnstr("abc", "abcd", 10) is None
    assert strnstr("abc", "bc", 1) is None
    assert strnstr("", "a", 5) is None
    assert strnstr("aaa", "x", 3) is None


@pytest.mark.parametrize("big", ["", "abc", "abcabc", "xxabx"])
@pytest.mark.parametrize("little", ["a", "ab", "bc", "x"])
def test_strnstr_full_length_matches_find(big, little):
    found = big.find(little)
    assert strnstr(big, little, len(big)) == (found if found >= 0 else None)


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)