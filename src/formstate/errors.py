"""formstate exception hierarchy.

Failed validation is never an exception; it is an ``Invalid`` value.
These types signal misuse of the library itself.
"""


class FormstateError(Exception):
    """Base for all formstate-specific errors."""


class ConfigurationError(FormstateError):
    """Raised when a ``FormConfig`` or a form definition is invalid."""
