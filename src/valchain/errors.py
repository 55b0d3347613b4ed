"""Fatal rule-configuration errors.

Validation failures are never exceptions: they are messages appended to a
chain.  The classes below signal caller bugs (a malformed pattern, a
non-numeric comparison operand, an unreadable config file) and always
propagate out of the rule that detected them.
"""

from __future__ import annotations


class RuleError(Exception):
    """Base class for errors caused by how a rule was invoked."""


class InvalidPatternError(RuleError, ValueError):
    """A ``regexp`` rule was given a pattern that does not compile."""


class OperandTypeError(RuleError, TypeError):
    """A rule argument has the wrong type (e.g. ``less_than("5")``)."""


class ConfigError(RuleError, ValueError):
    """A ``valchain.toml`` file could not be parsed."""
