"""
Core functionality for the Password Security Toolkit.
"""

from .cracker import HashCracker, brute_force_6digit
from .digest import DIGEST_ALGORITHM, hash_password, is_digest_hex, new_hasher
from .generator import generate_password
from .keyspace import NumericCandidateGenerator
from .strength import (
    StrengthReport,
    analyze_password,
    is_strong_password,
    check_passwords_list,
)
from .worker import scan_range, search_slice
