"""valchain — fluent value validation with human-readable messages.

Usage::

    from valchain import begin, collect

    report = collect(
        begin("email", form.get("email")).not_empty().email(),
        begin("age", form.get("age")).not_nil().greater_than_or_equal(18),
    )
    for entry in report:
        print(entry.name, entry.messages)
"""

from valchain.chain import Chain, Predicate, begin
from valchain.config.models import EmailConfig, RuleConfig
from valchain.domain.kinds import Kind, Ref
from valchain.errors import ConfigError, InvalidPatternError, OperandTypeError, RuleError
from valchain.report import ReportEntry, collect, is_valid

__version__ = "0.1.0"

__all__ = [
    "Chain",
    "ConfigError",
    "EmailConfig",
    "InvalidPatternError",
    "Kind",
    "OperandTypeError",
    "Predicate",
    "Ref",
    "ReportEntry",
    "RuleConfig",
    "RuleError",
    "__version__",
    "begin",
    "collect",
    "is_valid",
]
