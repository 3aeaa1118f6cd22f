"""Sequential identifier generation and the identifier aliases used across the package."""

from typing import TypeAlias

CaptureId: TypeAlias = int
RegId: TypeAlias = int
RuleId: TypeAlias = int
TagId: TypeAlias = int


class UniqueIdGenerator:
    """Hands out consecutive integer identifiers starting at zero."""

    def __init__(self) -> None:
        self._current_id = 0

    def generate_id(self) -> int:
        """Return a fresh identifier and advance the counter."""
        new_id = self._current_id
        self._current_id += 1
        return new_id

    @property
    def num_ids(self) -> int:
        """Number of identifiers handed out so far."""
        return self._current_id

    def __repr__(self) -> str:
        return f"UniqueIdGenerator(num_ids={self._current_id})"