"""Domain-specific exceptions for the transformation pipeline.

Malformed upstream payloads are never reported through these; they are
defaulted in place. These cover programmer misuse and the summary layer.
"""


class TransformError(Exception):
    """Base exception for transformation failures."""

    pass


class ContractViolationError(TransformError):
    """Raised when a caller breaks a function's input contract."""

    pass


class SummaryUnavailableError(TransformError):
    """Raised when no summary text can be produced for a game."""

    pass


class NarrativeGeneratorError(TransformError):
    """Raised by narrative generator collaborators that fail to produce text."""

    pass
