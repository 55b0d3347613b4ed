"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valchain.toml only contains
overrides.  A project without a config file gets exactly these values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class EmailConfig(BaseModel):
    """[rules.email] section — flags forwarded to email-validator."""

    model_config = {"frozen": True}

    check_deliverability: bool = False
    allow_smtputf8: bool = True
    allow_display_name: bool = True
    allow_quoted_local: bool = False
    allow_domain_literal: bool = False
    # Accept @test and @*.test domains; also skips deliverability checks.
    test_environment: bool = False


class RuleConfig(BaseModel):
    """[rules] section — tunables consulted by chain rules."""

    model_config = {"frozen": True}

    email: EmailConfig = Field(default_factory=EmailConfig)


class LogConfig(BaseModel):
    """[log] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class ValchainConfig(BaseModel):
    """Root configuration composing all sections of valchain.toml."""

    model_config = {"frozen": True}

    rules: RuleConfig = Field(default_factory=RuleConfig)
    log: LogConfig = Field(default_factory=LogConfig)
