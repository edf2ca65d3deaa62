"""
Utility modules for the Password Security Toolkit.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PasswordToolkitError,
    HashAlgorithmUnavailableError,
    InvalidPasswordLengthError,
    SearchCancelledError,
    WorkerError,
    ConfigError,
)
from .logger import Logger, debug, info, warning, error, critical
