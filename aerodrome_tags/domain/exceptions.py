from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class ContractTagsConfigError(DomainError):
    """Invocation cannot start with the given parameters."""


class UnsupportedChainError(ContractTagsConfigError):
    """The Aerodrome subgraph does not cover the requested chain."""


class MissingApiKeyError(ContractTagsConfigError):
    """No subgraph gateway credential was provided."""
