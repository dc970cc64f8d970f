"""
Decoration options.

The only recognised option is the error key: the state field that carries the
validation report.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

DEFAULT_ERROR_KEY = "errors"


@dataclass(frozen=True)
class ValidateOptions:
    """
    Immutable decoration options.

    Fields:
        error_key: State field under which the validation report is stored
    """
    error_key: str = DEFAULT_ERROR_KEY

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "ValidateOptions":
        """
        Build options from a plain mapping.

        Accepts either ``error_key`` or ``errorKey``. Missing or None values
        fall back to the default key.
        """
        data = data or {}
        error_key = data.get("error_key")
        if error_key is None:
            error_key = data.get("errorKey")
        if error_key is None:
            return ValidateOptions()
        return ValidateOptions(error_key=error_key)


OptionsLike = Union[ValidateOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> ValidateOptions:
    if isinstance(options, ValidateOptions):
        return options
    return ValidateOptions.from_dict(options)
