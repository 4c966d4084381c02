class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InvalidInputError(ProcessorError):
    """Raised when the input to be processed is not a string."""


class InputReadError(ProcessorError):
    """Raised when input text cannot be read or decoded."""
