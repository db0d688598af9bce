#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the events2md library.

This module defines specialized exception classes for the error conditions
that can occur while serializing document events to markdown. These
exceptions provide more specific error information than generic built-ins.

Exception Hierarchy
-------------------
- Events2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)
    - InvalidParameterError (malformed event parameter, e.g. colspan)

  - ParsingError (malformed serialized document tree)

  - RenderingError (output generation failures)
    - EscapeRuleError (escape rule built from an unusable pattern)
    - ReferenceLabelError (a registered label generator failed)
    - OutputWriteError (file write failures)

"""

from __future__ import annotations

from typing import Any


class Events2MdError(Exception):
    """Base exception class for all events2md-specific errors.

    This serves as the root exception class for all custom exceptions
    raised by the events2md library. Catching this will catch all
    library-specific errors.

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


class ValidationError(Events2MdError):
    """Exception raised for invalid input parameters or options.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'. "
                f"Please provide the correct options type for the renderer."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class InvalidParameterError(ValidationError):
    """Exception raised when an event parameter cannot be interpreted.

    Event parameters are free-form string mappings. A few keys carry a
    structured meaning (``colspan`` must be a positive integer) and a value
    that breaks that contract cannot be rendered faithfully.

    Parameters
    ----------
    parameter_name : str
        The parameter key
    parameter_value : any
        The offending value
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        parameter_name: str,
        parameter_value: Any,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid parameter error."""
        if message is None:
            message = f"Invalid value for parameter '{parameter_name}': {parameter_value!r}"
        super().__init__(
            message, parameter_name=parameter_name, parameter_value=parameter_value, original_error=original_error
        )


class ParsingError(Events2MdError):
    """Exception raised when a serialized document tree cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Events2MdError):
    """Exception raised when output rendering fails.

    This exception is raised when the rendering process encounters
    an error that prevents successful completion, such as:
    - An output buffer popped out of order
    - An escape rule that cannot be applied
    - A reference label that cannot be computed

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    Attributes
    ----------
    rendering_stage : str or None
        Where in the rendering process the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class EscapeRuleError(RenderingError):
    """Exception raised when an escape rule is applied with an unusable pattern.

    Parameters
    ----------
    pattern : str
        The regular expression source of the rule
    message : str, optional
        Custom error message

    """

    def __init__(self, pattern: str, message: str | None = None):
        """Initialize the escape rule error."""
        if message is None:
            message = f"Pattern must contain at least one capturing group: {pattern!r}"
        super().__init__(message, rendering_stage="escape")
        self.pattern = pattern


class ReferenceLabelError(RenderingError):
    """Exception raised when a registered URI label generator fails.

    Parameters
    ----------
    scheme : str
        The reference scheme whose generator failed
    reference : str
        The raw reference text
    original_error : Exception, optional
        The exception raised by the generator

    """

    def __init__(self, scheme: str, reference: str, original_error: Exception | None = None):
        """Initialize the reference label error."""
        message = f"Label generator for scheme '{scheme}' failed on reference: {reference!r}"
        super().__init__(message, rendering_stage="reference_label", original_error=original_error)
        self.scheme = scheme
        self.reference = reference


class OutputWriteError(RenderingError):
    """Exception raised when writing output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str
        Path to the file that failed to write

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
