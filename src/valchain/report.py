"""ReportEntry and collect() — aggregate finished chains into a report.

INVARIANT: A ReportEntry is only ever built for a chain with at least one
message, and entries keep the order in which chains were passed in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from valchain.chain import Chain

logger = logging.getLogger(__name__)


class ReportEntry(BaseModel):
    """Failure messages for one named value.

    Attributes:
        name: The chain's display label.
        messages: Failure messages in rule-invocation order (never empty).
    """

    model_config = {"frozen": True}

    name: str
    messages: list[str] = Field(min_length=1)


def collect(*chains: Chain) -> list[ReportEntry]:
    """Build report entries for every chain that recorded a failure.

    No deduplication and no sorting: two chains with the same name produce
    two entries.
    """
    entries = [
        ReportEntry(name=chain.name, messages=list(chain.messages))
        for chain in chains
        if chain.messages
    ]
    logger.debug("Collected %d failing of %d chains", len(entries), len(chains))
    return entries


def is_valid(*chains: Chain) -> bool:
    """True when none of *chains* recorded a failure."""
    return not any(chain.messages for chain in chains)
