"""A query expressed as a canonical sequence of static and variable tokens."""

from __future__ import annotations

import copy
from functools import total_ordering
from typing import Union

from .query_tokens import StaticQueryToken, VariableQueryToken

QueryToken = Union[StaticQueryToken, VariableQueryToken]


def _token_key(token: QueryToken) -> tuple:
    if isinstance(token, StaticQueryToken):
        return (0, token.query_substring)
    return (1, token.variable_type, token.query_substring, token.contains_wildcard)


def _copy_token(token: QueryToken) -> QueryToken:
    if isinstance(token, StaticQueryToken):
        return copy.copy(token)
    return token


@total_ordering
class QueryInterpretation:
    """
    A query as a sequence of static-text and variable tokens.

    Adjacent static tokens are always merged so that equal interpretations have equal
    token sequences. Interpretations compare lexicographically by token, with static
    tokens ordered before variable tokens.
    """

    def __init__(self) -> None:
        self._tokens: list[QueryToken] = []

    @classmethod
    def from_static(cls, query_substring: str) -> QueryInterpretation:
        interpretation = cls()
        interpretation.append_static_token(query_substring)
        return interpretation

    @classmethod
    def from_variable(
        cls, variable_type: int, query_substring: str, contains_wildcard: bool
    ) -> QueryInterpretation:
        interpretation = cls()
        interpretation.append_variable_token(variable_type, query_substring, contains_wildcard)
        return interpretation

    def clear(self) -> None:
        self._tokens.clear()

    def append_query_interpretation(self, suffix: QueryInterpretation) -> None:
        """Append ``suffix``'s tokens, merging a static boundary into one token."""
        incoming = [_copy_token(token) for token in suffix._tokens]
        if not incoming:
            return
        if (
            self._tokens
            and isinstance(self._tokens[-1], StaticQueryToken)
            and isinstance(incoming[0], StaticQueryToken)
        ):
            self._tokens[-1].append(incoming[0])
            incoming = incoming[1:]
        self._tokens.extend(incoming)

    def append_static_token(self, query_substring: str) -> None:
        """Append static text, merging it into a trailing static token. Empty text is ignored."""
        if not query_substring:
            return
        token = StaticQueryToken(query_substring)
        if self._tokens and isinstance(self._tokens[-1], StaticQueryToken):
            self._tokens[-1].append(token)
        else:
            self._tokens.append(token)

    def append_variable_token(
        self, variable_type: int, query_substring: str, contains_wildcard: bool
    ) -> None:
        self._tokens.append(VariableQueryToken(variable_type, query_substring, contains_wildcard))

    @property
    def logtype(self) -> list[QueryToken]:
        """A copy of the token sequence."""
        return [_copy_token(token) for token in self._tokens]

    def serialize(self) -> str:
        token_strings: list[str] = []
        wildcard_flags: list[str] = []
        for token in self._tokens:
            if isinstance(token, StaticQueryToken):
                token_strings.append(token.query_substring)
                wildcard_flags.append("0")
            else:
                token_strings.append(f"<{token.variable_type}>({token.query_substring})")
                wildcard_flags.append("1" if token.contains_wildcard else "0")
        return (
            f"logtype='{''.join(token_strings)}', "
            f"contains_wildcard='{''.join(wildcard_flags)}'"
        )

    def _key(self) -> list[tuple]:
        return [_token_key(token) for token in self._tokens]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryInterpretation):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: QueryInterpretation) -> bool:
        if not isinstance(other, QueryInterpretation):
            return NotImplemented
        return self._key() < other._key()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"QueryInterpretation({self._tokens!r})"