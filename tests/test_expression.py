from hypothesis import given
from hypothesis import strategies as st

from logsurgeon.expression import CharType, Expression, ExpressionCharacter


def types_of(text):
    return [c.type for c in Expression(text).chars]


def test_plain_characters_are_normal():
    assert types_of("abc") == [CharType.NORMAL] * 3


def test_wildcards_are_classified():
    chars = Expression("a*b?").chars
    assert chars[1].is_greedy_wildcard()
    assert chars[3].is_non_greedy_wildcard()
    assert not chars[0].is_greedy_wildcard()
    assert not chars[0].is_non_greedy_wildcard()


def test_escaped_wildcards_are_normal():
    assert types_of("\\*\\?") == [
        CharType.ESCAPE,
        CharType.NORMAL,
        CharType.ESCAPE,
        CharType.NORMAL,
    ]


def test_escaped_backslash_does_not_escape_next():
    assert types_of("\\\\*") == [
        CharType.ESCAPE,
        CharType.NORMAL,
        CharType.GREEDY_WILDCARD,
    ]


def test_trailing_backslash_is_escape():
    chars = Expression("ab\\").chars
    assert chars[-1].is_escape()


def test_character_values_preserved():
    text = "x*\\?y"
    expression = Expression(text)
    assert "".join(c.value for c in expression.chars) == text
    assert expression.search_string == text
    assert len(expression) == len(text)


def test_expression_character_equality():
    assert ExpressionCharacter("*", CharType.GREEDY_WILDCARD) == ExpressionCharacter(
        "*", CharType.GREEDY_WILDCARD
    )
    assert ExpressionCharacter("*") == ExpressionCharacter("*", CharType.NORMAL)


@given(st.text(alphabet="ab*?\\", max_size=30))
def test_no_escape_follows_escape(text):
    chars = Expression(text).chars
    assert len(chars) == len(text)
    for prev, cur in zip(chars, chars[1:]):
        if prev.is_escape():
            assert cur.type is CharType.NORMAL