"""
Exceptions raised by the Wordy expression tree.
"""


class WordyError(Exception):
    """Base class for all errors raised by this package."""


class UndefinedVariableError(WordyError, LookupError):
    """A variable was read from an evaluation context that does not bind it."""

    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name!r}")
        self.name = name


class InvariantViolationError(WordyError, RuntimeError):
    """The tree is corrupted, e.g. an operator outside the closed enumeration."""
