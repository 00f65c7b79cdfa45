"""formstate: tri-state validity for form fields.

A field result is ``Initial``, ``Valid`` or ``Invalid``. Free functions
transform and combine them, and merge per-field results into one
whole-form result.

Basic usage::

    from formstate import and_map, is_valid, message, to_string, valid, validate
    from formstate.parsers import chain, integer, required

    name = validate(required, form["name"])
    age = validate(chain(required, integer), form["age"])

    signup = valid(lambda n: lambda a: Signup(n, a))
    signup = and_map(name, signup)
    signup = and_map(age, signup)

    to_string(str, age)   # what to show in the <input>
    message(age)          # error text, or None

Template filters (kida)::

    from formstate import register_filters
    register_filters(env)
"""

from formstate.combinators import and_map, and_then, collect, map, map_message, validate
from formstate.config import FormConfig
from formstate.errors import ConfigurationError, FormstateError
from formstate.extract import is_invalid, is_valid, message, to_string, with_default
from formstate.forms import FieldSpec, field, validate_form
from formstate.result import (
    Err,
    Initial,
    Invalid,
    Ok,
    ParseResult,
    Valid,
    ValidationResult,
    initial,
    valid,
)

__version__ = "0.1.0.dev0"
__all__ = [
    "FILTERS",
    "ConfigurationError",
    "Err",
    "FieldSpec",
    "FormConfig",
    "FormstateError",
    "Initial",
    "Invalid",
    "Ok",
    "ParseResult",
    "Valid",
    "ValidationResult",
    "and_map",
    "and_then",
    "collect",
    "field",
    "initial",
    "is_invalid",
    "is_valid",
    "map",
    "map_message",
    "message",
    "register_filters",
    "to_string",
    "valid",
    "validate",
    "validate_form",
    "with_default",
]


def __getattr__(name: str) -> object:
    """Lazy import for the kida filters.

    Keeps ``import formstate`` free of the template engine until needed.
    """
    if name in ("register_filters", "FILTERS"):
        from formstate import filters as _filters

        return getattr(_filters, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
