"""Audit identity providers."""

from .static_auditor_provider import StaticAuditorProvider

__all__ = ["StaticAuditorProvider"]
