"""
Exceptions for the word-count benchmark harness.

Setup problems (an unreadable corpus, a malformed settings file) surface as
``WordCountError`` subclasses so the CLI can report them and exit cleanly.
Contract violations by callers, such as an empty corpus or a load level
outside 1..9, are raised as ``AssertionError`` by the modules that detect
them and are deliberately not part of this hierarchy.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class WordCountError(Exception):
    """Base exception class for all harness errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize a harness error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

        logger.debug(f"WordCountError: {message}", extra={
            "error_code": error_code,
            "context": context
        })


class ConfigurationError(WordCountError):
    """Raised when harness settings cannot be loaded or are invalid."""

    def __init__(self, message: str, config_path: Optional[str] = None):
        super().__init__(
            message,
            error_code="CONFIGURATION_ERROR",
            context={"config_path": config_path} if config_path else None
        )
        self.config_path = config_path


class CorpusLoadError(WordCountError):
    """Raised when the corpus source cannot be opened or read."""

    def __init__(self, source: str, cause: Optional[Exception] = None):
        """
        Initialize a corpus load error.

        Args:
            source: Path or description of the corpus source
            cause: The underlying I/O or decoding error
        """
        self.source = source
        self.cause = cause
        message = f"Failed to load corpus from '{source}'"
        if cause:
            message += f": {cause}"
        super().__init__(
            message,
            error_code="CORPUS_LOAD_FAILED",
            context={"source": source}
        )
