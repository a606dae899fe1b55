"""Exceptions raised by the resume parsing pipeline."""

from typing import Optional


class ResumeAnalyzerError(Exception):
    """Base class for all parser errors."""


class DecodeError(ResumeAnalyzerError):
    """
    Raised when a PDF cannot be decoded at all.

    Corrupt bytes, encrypted documents and documents with zero pages all end
    up here. No partial ParsedDocument is ever produced alongside it.

    Attributes:
        message: Error description
        cause: The underlying exception from the decoding library, if any
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        if cause is not None:
            super().__init__(f"{message}: {cause}")
        else:
            super().__init__(message)
