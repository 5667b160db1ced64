"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

Exception hierarchy for Veritree.

All custom exceptions inherit from VeritreeError base class.
"""


class VeritreeError(Exception):
    """Base exception for all Veritree errors."""
    pass


# Tree Construction Errors
class TreeError(VeritreeError):
    """Base exception for tree construction errors."""
    pass


class InputError(TreeError):
    """Raised when tree input is empty or contains an unsupported item."""
    pass


# Proof Errors
class ProofError(VeritreeError):
    """Base exception for proof-related errors."""
    pass


class ValidationError(ProofError):
    """Raised when a proof entry is malformed (wrong type or digest length)."""
    pass


# Configuration Errors
class ConfigurationError(VeritreeError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


class UnsupportedAlgorithmError(ConfigurationError):
    """Raised when a hash algorithm name is not recognized."""
    pass
