#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2tbl library.

This module defines the exception classes raised while compiling HTML tables
into tbl layout blocks and while loading configuration.

Exception Hierarchy
-------------------
- Html2TblError (base exception)

  - ParsingError (table layout failures)
    - MalformedSpanAttributeError (colspan/rowspan is not a positive integer)
    - MissingStructuralNameError (a node without a tag name)

  - ConfigError (configuration file discovery and loading)

Tokenizing never raises: the node parser degrades to empty nodes on input it
cannot match. Layout is strict, and any error above aborts the whole table.

"""

from typing import Any


class Html2TblError(Exception):
    """Base exception class for all html2tbl-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ParsingError(Html2TblError):
    """Exception raised when a table cannot be laid out.

    Parameters
    ----------
    message : str
        Description of the failure
    parsing_stage : str, optional
        The pass in which the error occurred ("format" or "generate")
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MalformedSpanAttributeError(ParsingError):
    """Exception raised when a ``colspan`` or ``rowspan`` value is not a positive integer.

    Parameters
    ----------
    attribute_name : str
        The offending attribute ("colspan" or "rowspan")
    value : Any
        The raw attribute value as found in the markup
    parsing_stage : str, optional
        The pass in which the value was read
    original_error : Exception, optional
        The conversion error, if any

    Attributes
    ----------
    attribute_name : str
        The offending attribute
    value : Any
        The raw attribute value

    """

    def __init__(
        self,
        attribute_name: str,
        value: Any,
        parsing_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the error with the offending attribute and value."""
        message = f"Invalid {attribute_name} value {value!r}: expected a positive integer"
        super().__init__(message, parsing_stage=parsing_stage, original_error=original_error)
        self.attribute_name = attribute_name
        self.value = value


class MissingStructuralNameError(ParsingError):
    """Exception raised when a node reaches the layout passes without a tag name."""

    def __init__(self, message: str | None = None, parsing_stage: str | None = None):
        """Initialize the error."""
        super().__init__(message or "Encountered a node without a tag name", parsing_stage=parsing_stage)


class ConfigError(Html2TblError):
    """Exception raised when a configuration file cannot be read or applied.

    Parameters
    ----------
    message : str
        Description of the problem
    config_path : str, optional
        Path of the configuration file involved
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, original_error)
        self.config_path = config_path


# Short names used throughout the layout documentation
MalformedSpanAttribute = MalformedSpanAttributeError
MissingStructuralName = MissingStructuralNameError


__all__ = [
    "Html2TblError",
    "ParsingError",
    "MalformedSpanAttributeError",
    "MalformedSpanAttribute",
    "MissingStructuralNameError",
    "MissingStructuralName",
    "ConfigError",
]
