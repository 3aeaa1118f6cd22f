"""Clamped views over a contiguous range of an :class:`Expression`."""

from __future__ import annotations

from collections.abc import Container

from .expression import Expression, ExpressionCharacter


class ExpressionView:
    """
    A view of ``expression`` covering ``[begin_idx, end_idx)``.

    Indices beyond the expression are clamped so the view is always valid.
    """

    def __init__(self, expression: Expression, begin_idx: int, end_idx: int) -> None:
        if begin_idx < 0 or end_idx < 0:
            raise ValueError("view indices must not be negative")
        end = min(end_idx, len(expression.chars))
        begin = min(begin_idx, end)
        self._expression = expression
        self._begin = begin
        self._end = end

    @property
    def expression(self) -> Expression:
        return self._expression

    @property
    def begin_idx(self) -> int:
        return self._begin

    @property
    def end_idx(self) -> int:
        return self._end

    @property
    def chars(self) -> tuple[ExpressionCharacter, ...]:
        return self._expression.chars[self._begin : self._end]

    @property
    def search_string(self) -> str:
        return self._expression.search_string[self._begin : self._end]

    def extend_to_adjacent_greedy_wildcards(self) -> tuple[bool, ExpressionView]:
        """
        Widen the view over greedy wildcards directly before and after it.

        Returns whether any widening happened, and the (possibly widened) view.
        """
        full = self._expression.chars
        begin, end = self._begin, self._end
        extended = False
        if begin > 0 and full[begin - 1].is_greedy_wildcard():
            begin -= 1
            extended = True
        if end < len(full) and full[end].is_greedy_wildcard():
            end += 1
            extended = True
        return extended, ExpressionView(self._expression, begin, end)

    def starts_or_ends_with_greedy_wildcard(self) -> bool:
        chars = self.chars
        return bool(chars) and (chars[0].is_greedy_wildcard() or chars[-1].is_greedy_wildcard())

    def is_well_formed(self) -> bool:
        """
        A view is well formed unless it starts right after an escape character or ends on one.
        An empty view is always well formed.
        """
        chars = self.chars
        if not chars:
            return True
        if self._begin > 0 and self._expression.chars[self._begin - 1].is_escape():
            return False
        return not chars[-1].is_escape()

    def generate_regex_string(self, special_characters: Container[str]) -> tuple[str, bool]:
        """
        Build a regex for this view.

        ``*`` becomes ``.*``, ``?`` becomes ``.``, escape characters are dropped and any
        character in ``special_characters`` is prefixed with a backslash. Returns the regex and
        whether it contains a wildcard.
        """
        parts: list[str] = []
        contains_wildcard = False
        for char in self.chars:
            if char.is_escape():
                continue
            if char.is_greedy_wildcard():
                parts.append(".*")
                contains_wildcard = True
            elif char.is_non_greedy_wildcard():
                parts.append(".")
                contains_wildcard = True
            elif char.value in special_characters:
                parts.append("\\" + char.value)
            else:
                parts.append(char.value)
        return "".join(parts), contains_wildcard

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpressionView):
            return NotImplemented
        return (
            self._expression is other._expression
            and self._begin == other._begin
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._expression), self._begin, self._end))

    def __repr__(self) -> str:
        return f"ExpressionView({self.search_string!r}, {self._begin}, {self._end})"