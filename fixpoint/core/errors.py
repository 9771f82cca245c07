"""Exceptions surfaced to callers of the solving engine."""


class MalformedInputError(ValueError):
    """Input grid has the wrong shape or holds values outside 0-9."""


class UnsolvableError(RuntimeError):
    """Backtracking exhausted every checkpoint without reaching a solution."""
