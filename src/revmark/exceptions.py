#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the revmark library.

Exception Hierarchy
-------------------
- RevmarkError (base exception)

  - ValidationError (argument and option contract violations)

  - ConversionError (structural failures while rendering Markdown)
    - MalformedListError (block content directly under a list)
    - UnknownTagError (element rejected by the "raise" policy)
    - MalformedShortcodeError (shortcode with too few tokens)

  - DependencyError (missing optional parser backends)

"""

from typing import Any


class RevmarkError(Exception):
    """Base exception class for all revmark-specific errors.

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


class ValidationError(RevmarkError):
    """Exception raised when an argument violates its contract.

    Covers missing values where one is required, multi-line text passed to a
    single-line operation and documents nested beyond the configured limit.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class ConversionError(RevmarkError):
    """Base exception for structural failures during Markdown conversion.

    Parameters
    ----------
    message : str
        Description of the failure
    tag_name : str, optional
        Name of the element being converted when the failure occurred
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, tag_name: str | None = None, original_error: Exception | None = None):
        """Initialize the conversion error."""
        super().__init__(message, original_error=original_error)
        self.tag_name = tag_name


class MalformedListError(ConversionError):
    """Exception raised when a paragraph sits directly inside ``<ol>``/``<ul>``.

    The list repair pre-pass normally moves such content into a list item; this
    error surfaces input that bypassed it rather than guessing the intent.
    """

    def __init__(self, message: str = "Malformed list.", tag_name: str | None = "p"):
        """Initialize the malformed list error."""
        super().__init__(message, tag_name=tag_name)


class UnknownTagError(ConversionError):
    """Exception raised for an element without a converter under the "raise" policy.

    Parameters
    ----------
    tag_name : str
        The unsupported element name

    """

    def __init__(self, tag_name: str):
        """Initialize the unknown tag error."""
        super().__init__(f"Unknown tag: {tag_name}", tag_name=tag_name)


class MalformedShortcodeError(ConversionError):
    """Exception raised when a shortcode cannot be split into name and parameters.

    Parameters
    ----------
    shortcode : str
        The shortcode text that failed to lex

    """

    def __init__(self, shortcode: str):
        """Initialize the malformed shortcode error."""
        super().__init__(f"Unexpected shortcode format: {shortcode}")
        self.shortcode = shortcode


class DependencyError(RevmarkError):
    """Exception raised when an optional package required for parsing is missing.

    Parameters
    ----------
    message : str
        Description of the dependency error
    missing_packages : list of str, optional
        Names of the missing packages
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        missing_packages: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the dependency error."""
        super().__init__(message, original_error=original_error)
        self.missing_packages = missing_packages or []
