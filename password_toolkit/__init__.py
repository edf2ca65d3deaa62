"""
Password Security Toolkit

Hash credentials, recover 6-digit numeric passwords from their SHA-256
digest, check password strength, and generate strong passwords.
"""

from password_toolkit.core.cracker import HashCracker, brute_force_6digit
from password_toolkit.core.digest import hash_password
from password_toolkit.core.generator import generate_password
from password_toolkit.core.strength import (
    StrengthReport,
    analyze_password,
    is_strong_password,
    check_passwords_list,
)

__version__ = "0.1.0"
