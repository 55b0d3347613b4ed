"""Chain — fluent, immutable rule evaluation for one named value.

A chain wraps a single value together with its :class:`Kind`, the failure
messages collected so far, and a suppression flag.  Every rule method
returns a *new* chain; the receiver is never modified, so a partially built
chain can be branched and reused safely::

    base = begin("age", 17).not_nil()
    adult = base.greater_than_or_equal(18)
    teen = base.less_than(20)

Rule contract:

- If the chain is suppressed (``when(False)`` was called), the rule is a
  no-op and returns the chain unchanged.
- Otherwise the rule's check runs against the value.  On failure exactly one
  message is appended: the caller's ``message=`` override verbatim, or the
  rule's default template.
- Rules that only make sense for numbers or strings silently skip values of
  other kinds, so one chain can mix both families behind a ``when`` guard.

NaN values and operands (float or ``Decimal``) never fail a comparison and
are never empty, the way IEEE comparisons against NaN are all false.

Argument mistakes (malformed regex, non-numeric comparison operand) raise
:mod:`valchain.errors` exceptions instead of producing messages.
"""

from __future__ import annotations

import logging
import numbers
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

from valchain.config.models import RuleConfig
from valchain.domain import messages
from valchain.domain.emails import is_mailbox
from valchain.domain.equality import deep_equal
from valchain.domain.kinds import (
    NUMERIC_KINDS,
    SIZED_KINDS,
    Kind,
    classify,
    is_blank,
    is_nan,
    scalar,
    size_of,
)
from valchain.errors import InvalidPatternError, OperandTypeError

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], tuple[bool, str]]
"""Custom check: receives the value, returns ``(ok, message)``."""


def _check_operand(rule: str, operand: Any) -> None:
    """Reject comparison operands that are not real numbers."""
    if isinstance(operand, bool) or not isinstance(operand, (numbers.Real, Decimal)):
        msg = f"{rule}() expects a real number, got {type(operand).__name__}: {operand!r}"
        raise OperandTypeError(msg)


def _check_bound(rule: str, bound: Any) -> None:
    """Reject string-length bounds that are not plain integers."""
    if isinstance(bound, bool) or not isinstance(bound, int):
        msg = f"{rule}() expects an int bound, got {type(bound).__name__}: {bound!r}"
        raise OperandTypeError(msg)


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        msg = f"regexp() expects a str or compiled pattern, got {type(pattern).__name__}"
        raise OperandTypeError(msg)
    try:
        return re.compile(pattern)
    except re.error as exc:
        msg = f"Invalid regular expression {pattern!r}: {exc}"
        raise InvalidPatternError(msg) from exc


@dataclass(frozen=True, slots=True)
class Chain:
    """Validation state for one named value.

    Attributes:
        name: Display label, used verbatim in default messages.
        value: The value under validation.
        kind: Classification of ``value``, fixed at construction
            (re-derived only by :meth:`unwrap`).
        messages: Failure messages in rule-invocation order.
        suppressed: Once True, every later rule is a no-op.
        config: Rule tunables (email-validator flags).
    """

    name: str
    value: Any
    kind: Kind
    messages: tuple[str, ...] = ()
    suppressed: bool = False
    config: RuleConfig = field(default_factory=RuleConfig, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        """True while no rule has failed."""
        return not self.messages

    # --- Internals ---

    def _fail(self, rule: str, default: str, override: str | None) -> Chain:
        text = default if override is None else override
        logger.debug("Rule %s failed for %s: %s", rule, self.name, text)
        return replace(self, messages=(*self.messages, text))

    def _number(self) -> Any:
        """Return the numeric value, or None when the kind is not numeric."""
        if self.kind not in NUMERIC_KINDS:
            return None
        return scalar(self.value)

    def _is_empty(self) -> bool | None:
        """Zero-value test shared by :meth:`not_empty` and :meth:`empty`.

        Returns None when emptiness is undefined for the value (OTHER, or a
        POINTER that does not point at an ARRAY).
        """
        kind = self.kind
        if kind is Kind.NIL:
            return True
        if kind in SIZED_KINDS or kind is Kind.POINTER:
            size = size_of(self.value, kind)
            return None if size is None else size < 1
        if kind is Kind.BOOL:
            return not scalar(self.value)
        if kind is Kind.COMPLEX or kind in NUMERIC_KINDS:
            number = scalar(self.value)
            return not is_nan(number) and bool(number == 0)
        if kind is Kind.STRING:
            return is_blank(self.value)
        return None

    def _compare(
        self,
        rule: str,
        operand: Any,
        fails: Callable[[Any, Any], bool],
        template: str,
        override: str | None,
    ) -> Chain:
        if self.suppressed:
            return self
        _check_operand(rule, operand)
        current = self._number()
        if current is None or is_nan(current) or is_nan(operand):
            return self
        if not fails(current, operand):
            return self
        default = template.format(name=self.name, other=messages.render(operand))
        return self._fail(rule, default, override)

    # --- Flow control ---

    def when(self, condition: bool) -> Chain:
        """Suppress all following rules unless *condition* holds.

        Suppression is permanent: a later ``when(True)`` does not lift it.
        """
        if condition or self.suppressed:
            return self
        logger.debug("Chain %s suppressed", self.name)
        return replace(self, suppressed=True)

    def unwrap(self) -> Chain:
        """Dereference a :class:`~valchain.domain.kinds.Ref` one level.

        ``value`` and ``kind`` switch to the referenced value.  Non-pointer
        values are left alone.
        """
        if self.suppressed or self.kind is not Kind.POINTER:
            return self
        target = self.value.target
        return replace(self, value=target, kind=classify(target))

    # --- Presence ---

    def not_nil(self, *, message: str | None = None) -> Chain:
        """Fail when the value is None."""
        if self.suppressed or self.kind is not Kind.NIL:
            return self
        return self._fail("not_nil", messages.NOT_NIL.format(name=self.name), message)

    def nil(self, *, message: str | None = None) -> Chain:
        """Fail when the value is anything but None."""
        if self.suppressed or self.kind is Kind.NIL:
            return self
        return self._fail("nil", messages.NIL.format(name=self.name), message)

    def not_empty(self, *, message: str | None = None) -> Chain:
        """Fail when the value is None or its kind's zero value.

        Zero values: empty collections and queues (and ``Ref`` to an empty
        tuple), ``False``, ``0``/``0.0``/``0j``, and strings that are empty
        or whitespace-only.
        """
        if self.suppressed or self._is_empty() is not True:
            return self
        return self._fail("not_empty", messages.NOT_EMPTY.format(name=self.name), message)

    def empty(self, *, message: str | None = None) -> Chain:
        """Fail when the value is not its kind's zero value.

        Strings must have length zero; whitespace-only strings fail here
        even though :meth:`not_empty` also rejects them.  None passes.
        """
        if self.suppressed:
            return self
        if self.kind is Kind.STRING:
            failed = len(self.value) > 0
        else:
            failed = self._is_empty() is False
        if not failed:
            return self
        return self._fail("empty", messages.EMPTY.format(name=self.name), message)

    # --- Equality ---

    def equal(self, other: Any, *, message: str | None = None) -> Chain:
        """Fail unless the value deep-equals *other* (types included)."""
        if self.suppressed or deep_equal(self.value, other):
            return self
        default = messages.EQUAL.format(name=self.name, other=messages.render(other))
        return self._fail("equal", default, message)

    def not_equal(self, other: Any, *, message: str | None = None) -> Chain:
        """Fail when the value deep-equals *other*."""
        if self.suppressed or not deep_equal(self.value, other):
            return self
        default = messages.NOT_EQUAL.format(name=self.name, other=messages.render(other))
        return self._fail("not_equal", default, message)

    # --- String length (STRING only) ---

    def length(self, minimum: int, maximum: int, *, message: str | None = None) -> Chain:
        """Fail when the character count is outside ``[minimum, maximum]``."""
        if self.suppressed:
            return self
        _check_bound("length", minimum)
        _check_bound("length", maximum)
        if self.kind is not Kind.STRING:
            return self
        size = len(self.value)
        if minimum <= size <= maximum:
            return self
        default = messages.LENGTH.format(name=self.name, min=minimum, max=maximum, length=size)
        return self._fail("length", default, message)

    def min_length(self, minimum: int, *, message: str | None = None) -> Chain:
        """Fail when the string has fewer than *minimum* characters."""
        if self.suppressed:
            return self
        _check_bound("min_length", minimum)
        if self.kind is not Kind.STRING or len(self.value) >= minimum:
            return self
        default = messages.MIN_LENGTH.format(name=self.name, min=minimum, length=len(self.value))
        return self._fail("min_length", default, message)

    def max_length(self, maximum: int, *, message: str | None = None) -> Chain:
        """Fail when the string has more than *maximum* characters."""
        if self.suppressed:
            return self
        _check_bound("max_length", maximum)
        if self.kind is not Kind.STRING or len(self.value) <= maximum:
            return self
        default = messages.MAX_LENGTH.format(name=self.name, max=maximum, length=len(self.value))
        return self._fail("max_length", default, message)

    # --- Numeric comparisons (INT, UINT, FLOAT only) ---

    def less_than(self, other: numbers.Real | Decimal, *, message: str | None = None) -> Chain:
        return self._compare("less_than", other, operator.ge, messages.LESS_THAN, message)

    def less_than_or_equal(
        self, other: numbers.Real | Decimal, *, message: str | None = None
    ) -> Chain:
        return self._compare(
            "less_than_or_equal", other, operator.gt, messages.LESS_THAN_OR_EQUAL, message
        )

    def greater_than(self, other: numbers.Real | Decimal, *, message: str | None = None) -> Chain:
        return self._compare("greater_than", other, operator.le, messages.GREATER_THAN, message)

    def greater_than_or_equal(
        self, other: numbers.Real | Decimal, *, message: str | None = None
    ) -> Chain:
        return self._compare(
            "greater_than_or_equal", other, operator.lt, messages.GREATER_THAN_OR_EQUAL, message
        )

    def between(
        self,
        minimum: numbers.Real | Decimal,
        maximum: numbers.Real | Decimal,
        *,
        message: str | None = None,
    ) -> Chain:
        """Fail when the value lies strictly inside ``(minimum, maximum)``.

        Values equal to a bound or outside the interval pass.  Existing
        callers depend on this exact condition and message.
        """
        if self.suppressed:
            return self
        _check_operand("between", minimum)
        _check_operand("between", maximum)
        current = self._number()
        if current is None or any(is_nan(x) for x in (current, minimum, maximum)):
            return self
        if not minimum < current < maximum:
            return self
        default = messages.BETWEEN.format(
            name=self.name, min=messages.render(minimum), max=messages.render(maximum)
        )
        return self._fail("between", default, message)

    # --- Format (STRING only) ---

    def regexp(self, pattern: str | re.Pattern[str], *, message: str | None = None) -> Chain:
        """Fail unless *pattern* matches the whole string.

        Raises:
            InvalidPatternError: If *pattern* does not compile.
        """
        if self.suppressed:
            return self
        compiled = _compile(pattern)
        if self.kind is not Kind.STRING or compiled.fullmatch(self.value) is not None:
            return self
        return self._fail("regexp", messages.REGEXP.format(name=self.name), message)

    def email(self, *, message: str | None = None) -> Chain:
        """Fail unless the string is a single RFC 5322 mailbox address."""
        if self.suppressed or self.kind is not Kind.STRING:
            return self
        if is_mailbox(self.value, self.config.email):
            return self
        return self._fail("email", messages.EMAIL.format(name=self.name), message)

    # --- Custom ---

    def is_(self, predicate: Predicate, *, message: str | None = None) -> Chain:
        """Run a custom check on the value.

        *predicate* returns ``(ok, text)``.  On failure *text* becomes the
        message; a failure with empty *text* and no override appends nothing.
        """
        if self.suppressed:
            return self
        passed, text = predicate(self.value)
        if passed:
            return self
        if message is None and not text:
            logger.debug("Rule is_ failed for %s without a message", self.name)
            return self
        return self._fail("is_", text, message)


def begin(name: str, value: Any, *, config: RuleConfig | None = None) -> Chain:
    """Start a validation chain for *value*, labelled *name* in messages.

    Never fails: None is a valid value and classifies as ``Kind.NIL``.
    """
    return Chain(
        name=name,
        value=value,
        kind=classify(value),
        config=config if config is not None else RuleConfig(),
    )
