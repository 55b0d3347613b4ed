"""Domain layer — value kinds, equality, message templates, format checks.

This layer depends only on stdlib, pydantic models from config, and
email-validator.  It must never import from chain, report, or output.
"""
