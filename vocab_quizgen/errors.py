"""Failure modes surfaced to the host layer (HTTP routes, CLI)."""
from __future__ import annotations


class QuizGenError(Exception):
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(QuizGenError):
    """Vocabulary text produced no usable entries, or a request field is invalid."""

    kind = "input"


class ConfigurationError(QuizGenError):
    """No usable API credential or provider; generation cannot proceed."""

    kind = "configuration"


class TransportError(QuizGenError):
    """The LLM call failed at the network/protocol level or timed out."""

    kind = "transport"


class EmptyResponseError(QuizGenError):
    """The LLM call succeeded but returned no usable text."""

    kind = "empty_response"


class FileIOError(QuizGenError):
    """Reading the vocabulary file or writing the result file failed.

    A cancelled file pick is not an error and never raises this.
    """

    kind = "file_io"
