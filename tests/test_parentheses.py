import pytest

from managekit.parentheses import is_balanced


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(){}{}[]", True),
        ("){}{}[]", False),
        ("{", False),
        ("({[]})", True),
    ],
)
def test_source_examples(text, expected):
    assert is_balanced(text) is expected


def test_empty_string_is_balanced():
    assert is_balanced("") is True


@pytest.mark.parametrize("text", ["(]", "([)]", "{)", "[}"])
def test_mismatched_pairs(text):
    assert is_balanced(text) is False


def test_other_characters_ignored():
    assert is_balanced("f(x) = [a + {b}]") is True
    assert is_balanced("f(x = [a]") is False


def test_unclosed_opener_after_balanced_part():
    assert is_balanced("()(") is False


def test_wrapping_balanced_text_stays_balanced():
    inner = "({[]})[]"
    assert is_balanced(inner)
    assert is_balanced("(" + inner + ")")
    assert not is_balanced(inner + ")")