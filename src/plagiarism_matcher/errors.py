from __future__ import annotations


class PlagiarismMatcherError(Exception):
    """Base class for errors raised by plagiarism_matcher."""


class InvalidMatchLengthError(PlagiarismMatcherError, ValueError):
    """Raised when the minimum match length is not a positive integer."""


class UnknownAlgorithmError(PlagiarismMatcherError, ValueError):
    """Raised when an algorithm name cannot be resolved."""


class DocumentExtractionError(PlagiarismMatcherError, RuntimeError):
    """Raised when text cannot be pulled out of an input document."""


class UnsupportedFileTypeError(DocumentExtractionError):
    """Raised for documents that are not .txt, .pdf or .docx."""
