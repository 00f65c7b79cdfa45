"""Form configuration.

FormConfig is a frozen dataclass: immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass

from formstate.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Settings for reading raw form data and registering template filters.

    All fields have defaults. Override what you need::

        config = FormConfig(strip_whitespace=False, filter_prefix="fs_")
    """

    # Strip surrounding whitespace before parsing (raw_input keeps the original)
    strip_whitespace: bool = True

    # Prepended to every filter name by register_filters()
    filter_prefix: str = ""

    def __post_init__(self) -> None:
        if self.filter_prefix and not f"{self.filter_prefix}x".isidentifier():
            msg = f"filter_prefix must be usable in a filter name, got {self.filter_prefix!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = FormConfig()
