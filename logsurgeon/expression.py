"""Wildcard search expressions split into classified characters."""

from dataclasses import dataclass
from enum import Enum, auto


class CharType(Enum):
    """Role of a character within a wildcard expression."""

    NORMAL = auto()
    GREEDY_WILDCARD = auto()
    NON_GREEDY_WILDCARD = auto()
    ESCAPE = auto()


_SPECIAL_TYPES = {
    "*": CharType.GREEDY_WILDCARD,
    "?": CharType.NON_GREEDY_WILDCARD,
    "\\": CharType.ESCAPE,
}


@dataclass(frozen=True)
class ExpressionCharacter:
    """A single character of an expression together with its role."""

    value: str
    type: CharType = CharType.NORMAL

    def is_greedy_wildcard(self) -> bool:
        return self.type is CharType.GREEDY_WILDCARD

    def is_non_greedy_wildcard(self) -> bool:
        return self.type is CharType.NON_GREEDY_WILDCARD

    def is_escape(self) -> bool:
        return self.type is CharType.ESCAPE


class Expression:
    """
    A string-matching expression.

    ``*`` matches zero or more characters and ``?`` matches exactly one. A backslash makes
    the following character literal.
    """

    def __init__(self, search_string: str) -> None:
        self._search_string = search_string
        chars: list[ExpressionCharacter] = []
        for c in search_string:
            escaped = bool(chars) and chars[-1].is_escape()
            char_type = CharType.NORMAL if escaped else _SPECIAL_TYPES.get(c, CharType.NORMAL)
            chars.append(ExpressionCharacter(c, char_type))
        self._chars = tuple(chars)

    @property
    def chars(self) -> tuple[ExpressionCharacter, ...]:
        return self._chars

    @property
    def search_string(self) -> str:
        return self._search_string

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"Expression({self._search_string!r})"