class TabularError(Exception):
    """Base exception for all tabular processing errors."""


class ParseError(TabularError):
    """Raised when a tabular file cannot be decoded or parsed."""


class EmptyResultError(TabularError):
    """Raised when no record survives filtering across the whole batch."""


class RuleValidationError(TabularError):
    """Raised when a tag rule record cannot be turned into a rule."""
