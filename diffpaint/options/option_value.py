"""Option values tagged with where they came from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Type, Union

OptionValue = Union[bool, float, int, str, None]

_VALUE_TYPES = (bool, float, int, str, type(None))


class Provenance(Enum):
    GIT_CONFIG = "git-config"
    DEFAULT = "default"


class OptionValueTypeError(TypeError):
    """An option value is not of the type it was expected to have."""


@dataclass(frozen=True)
class ProvenancedOptionValue:
    """A boolean, float, non-negative integer, string or absent string option value."""

    value: OptionValue
    provenance: Provenance

    def __post_init__(self) -> None:
        if type(self.value) not in _VALUE_TYPES:
            raise OptionValueTypeError(
                f"Unsupported option value type: {type(self.value).__name__}"
            )
        if type(self.value) is int and self.value < 0:
            raise OptionValueTypeError(f"Integer option values must be non-negative: {self.value}")

    def as_type(self, expected: Union[Optional[type], Tuple[Optional[type], ...]]) -> OptionValue:
        """Return the value if its type is exactly one of the expected types."""
        accepted = expected if isinstance(expected, tuple) else (expected,)
        accepted_types: Tuple[Type, ...] = tuple(
            type(None) if t is None else t for t in accepted
        )
        if type(self.value) not in accepted_types:
            names = ", ".join(t.__name__ for t in accepted_types)
            raise OptionValueTypeError(
                f"Error converting option value {self.value!r} to {names}."
            )
        return self.value