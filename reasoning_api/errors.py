"""
Exceptions raised by the reasoning core.

Only input validation can fail. Everything else in the pipeline is total
over arbitrary strings, and history storage problems are logged and
degraded rather than raised.
"""


class ReasoningError(Exception):
    """Base exception for reasoning core errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(ReasoningError):
    """Raised when the submitted text is empty or whitespace only."""

    def __init__(self, message: str = "Please enter some text to analyze."):
        super().__init__(message)
