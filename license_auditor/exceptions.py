"""Custom exceptions for license-auditor."""


class LicenseAuditorError(Exception):
    """Base exception for all license-auditor errors."""

    pass


class DefinitionsUnavailableError(LicenseAuditorError):
    """Exception raised when the license group definitions cannot be read."""

    pass


class ConfigurationError(LicenseAuditorError):
    """Exception raised when configuration is invalid."""

    pass


class ScanError(LicenseAuditorError):
    """Exception raised when the installed package database cannot be scanned."""

    pass
