"""Email address format check backed by email-validator.

Deliverability (DNS) checks are off by default so that rule evaluation
never performs I/O.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email

if TYPE_CHECKING:
    from valchain.config.models import EmailConfig

logger = logging.getLogger(__name__)


def is_mailbox(text: str, config: EmailConfig) -> bool:
    """Check whether *text* is a single RFC 5322 mailbox.

    Accepts a bare ``addr-spec`` (``alice@example.com``) and, when
    ``config.allow_display_name`` is set, the ``Alice <alice@example.com>``
    form.  Domains must be fully qualified, so ``a@b`` is rejected.

    Addresses must be globally routable: special-use domains (``.local``,
    ``localhost``, ``.invalid``, ``.onion``, ``.arpa``, ``.test``) are
    rejected even though they are syntactically valid.  Set
    ``config.test_environment`` to accept ``.test`` addresses.
    """
    try:
        validate_email(
            text,
            allow_smtputf8=config.allow_smtputf8,
            allow_quoted_local=config.allow_quoted_local,
            allow_domain_literal=config.allow_domain_literal,
            allow_display_name=config.allow_display_name,
            check_deliverability=config.check_deliverability,
            test_environment=config.test_environment,
        )
    except EmailNotValidError as exc:
        logger.debug("Rejected email %r: %s", text, exc)
        return False
    return True
