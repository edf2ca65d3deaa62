"""
Custom exceptions for the Password Security Toolkit.
"""

class PasswordToolkitError(Exception):
    """Base exception for password toolkit errors"""
    pass


class HashAlgorithmUnavailableError(PasswordToolkitError):
    """The fixed digest algorithm is missing from this Python build"""
    pass


class InvalidPasswordLengthError(PasswordToolkitError, ValueError):
    """Requested password length is too short"""
    pass


class SearchCancelledError(PasswordToolkitError):
    """Brute-force search was cancelled before it finished"""
    pass


class WorkerError(PasswordToolkitError):
    """Error in worker process"""
    pass


class ConfigError(PasswordToolkitError):
    """Error in configuration"""
    pass
