"""Static-text and variable tokens that make up a query interpretation."""

from dataclasses import dataclass


@dataclass(order=True)
class StaticQueryToken:
    """Static text taken from a query. Ordered by its text."""

    query_substring: str

    def append(self, other: "StaticQueryToken") -> None:
        """Extend this token with the text of ``other``."""
        self.query_substring += other.query_substring


@dataclass(frozen=True, order=True)
class VariableQueryToken:
    """
    A query substring interpreted as a variable of a given type.

    Ordered by variable type, then substring, then whether it holds a wildcard
    (``False`` before ``True``).
    """

    variable_type: int
    query_substring: str
    contains_wildcard: bool = False