#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2md library.

The converter itself never raises on malformed HTML: unknown elements,
stray closing tags and unterminated markup are absorbed, and unbalanced
nesting is reported through ``Converter.is_well_formed()``. The exceptions
below are raised only when the library is called with arguments it cannot
work with.

Exception Hierarchy
-------------------
- Html2MdError (base exception)

  - InvalidInputError (input is neither str nor bytes)

  - ValidationError (invalid arguments to the public API)

"""

from __future__ import annotations

from typing import Any


class Html2MdError(Exception):
    """Base exception class for all html2md-specific errors.

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


class InvalidInputError(Html2MdError, TypeError):
    """Exception raised when the HTML input has an unsupported type.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    input_type : type, optional
        The type that was passed in

    """

    def __init__(self, message: str, input_type: type | None = None, original_error: Exception | None = None):
        """Initialize the error with the offending input type."""
        super().__init__(message, original_error)
        self.input_type = input_type


class ValidationError(Html2MdError):
    """Exception raised for invalid arguments to the public API.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    parameter_name : str, optional
        Name of the parameter that failed validation
    parameter_value : Any, optional
        The value that failed validation

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the error with parameter details."""
        super().__init__(message, original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value
