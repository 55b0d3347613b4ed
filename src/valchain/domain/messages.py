"""Default failure messages, one template per rule.

Templates use :meth:`str.format` fields filled through :func:`render`.
Caller-supplied overrides are used verbatim and never pass through these templates.
"""

from __future__ import annotations

NOT_NIL = "{name} must not be empty."
NIL = "{name} must be empty."
NOT_EMPTY = "{name} should not be empty."
EMPTY = "{name} must be empty."
EQUAL = "{name} should be equal to {other}."
NOT_EQUAL = "{name} should not be equal to {other}."

# LENGTH has no trailing period.
LENGTH = "{name} must be between {min} and {max} characters. You entered {length} characters"
MIN_LENGTH = (
    "The length of {name} must be at least {min} characters. You entered {length} characters."
)
MAX_LENGTH = (
    "The length of {name} must be {max} characters or fewer. You entered {length} characters."
)

LESS_THAN = "{name} must be less than {other}."
LESS_THAN_OR_EQUAL = "{name} must be less than or equal to {other}."
GREATER_THAN = "{name} must be greater than {other}."
GREATER_THAN_OR_EQUAL = "{name} must be greater than or equal to {other}."
BETWEEN = "{name} must be between {min} and {max}."

REGEXP = "{name} is not in the correct format"
EMAIL = "{name} is not a valid email address"


def render(value: object) -> str:
    """Render a placeholder value for a default message.

    Integral floats drop their fractional part (``10.0`` renders as ``10``)
    so numeric bounds read the same whatever type the caller passed.
    Everything else renders with :func:`str`.

    Examples:
        >>> render(10.0)
        '10'
        >>> render(0.5)
        '0.5'
        >>> render([1.0])
        '[1.0]'
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
