"""
Normalization of loosely spelled options.

The core accepts only genuine bools for `control` and the canonical tail
names. These helpers translate the spellings people type on a command line
or carry over from other tools (0/1, "yes"/"no", tail codes 2/-1/1) before
the values reach the design.
"""

import numbers
from typing import Any

from holmsidak.core.exceptions import ConfigurationError
from holmsidak.stepdown._common import VALID_TAILS


_TRUE_STRINGS = ("1", "true", "t", "yes", "y", "on")
_FALSE_STRINGS = ("0", "false", "f", "no", "n", "off")

_TAIL_ALIASES = {
    "two.sided": "two.sided",
    "two-sided": "two.sided",
    "two_sided": "two.sided",
    "twosided": "two.sided",
    "both": "two.sided",
    "2": "two.sided",
    "less": "less",
    "left": "less",
    "-1": "less",
    "greater": "greater",
    "right": "greater",
    "1": "greater",
}


def as_bool(value: Any, name: str = "control") -> bool:
    """
    Interpret a boolean-like value.

    Accepts bools, the integers 0 and 1, and the usual yes/no spellings
    (case-insensitive).

    Raises:
        ConfigurationError: If the value has no unambiguous truth value
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, numbers.Integral) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _TRUE_STRINGS:
            return True
        if key in _FALSE_STRINGS:
            return False
    raise ConfigurationError(
        f"{name}: cannot interpret {value!r} as a boolean",
        option=name, value=value,
    )


def as_tail(value: Any) -> str:
    """
    Map a tail spelling or numeric code onto one of VALID_TAILS.

    Numeric codes: 2 two-sided, -1 left ("less"), 1 right ("greater").

    Raises:
        ConfigurationError: If the value is not a recognized tail
    """
    if isinstance(value, bool):
        raise ConfigurationError(
            f"tail must be one of {VALID_TAILS}, got {value!r}",
            option="tail", value=value,
        )
    if isinstance(value, numbers.Real) and float(value).is_integer():
        key = str(int(value))
    elif isinstance(value, str):
        key = value.strip().lower()
    else:
        key = None

    if key not in _TAIL_ALIASES:
        raise ConfigurationError(
            f"tail must be one of {VALID_TAILS} or a code in (2, -1, 1), got {value!r}",
            option="tail", value=value,
        )
    return _TAIL_ALIASES[key]
