"""
Password strength rules for the Password Security Toolkit.

A password is strong when it is at least 12 characters long, mixes upper and
lower case letters with at least one decimal digit, and contains no
whitespace. Punctuation and symbols are neither required nor penalised; they
only count towards the length.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

from password_toolkit.utils.logger import debug

MIN_STRONG_LENGTH = 12


@dataclass(frozen=True)
class StrengthReport:
    """Character classes found in one password"""
    length: int
    has_upper: bool
    has_lower: bool
    has_digit: bool
    has_whitespace: bool

    @property
    def is_strong(self) -> bool:
        return (self.length >= MIN_STRONG_LENGTH
                and self.has_upper
                and self.has_lower
                and self.has_digit
                and not self.has_whitespace)


def analyze_password(password: str) -> StrengthReport:
    """Classify each character of password in a single pass"""
    has_upper = has_lower = has_digit = has_whitespace = False

    for char in password:
        if char.isupper():
            has_upper = True
        elif char.islower():
            has_lower = True
        elif char.isdecimal():
            has_digit = True
        elif char.isspace():
            has_whitespace = True

    return StrengthReport(
        length=len(password),
        has_upper=has_upper,
        has_lower=has_lower,
        has_digit=has_digit,
        has_whitespace=has_whitespace,
    )


def is_strong_password(password: str) -> bool:
    """Check a password against the strength rules"""
    return analyze_password(password).is_strong


def check_passwords_list(passwords: Iterable[str]) -> Dict[str, bool]:
    """Check several passwords at once

    Args:
        passwords: Passwords to check; repeated entries are checked once

    Returns:
        Mapping of each distinct password to its verdict
    """
    results = {}
    for password in passwords:
        if password not in results:
            results[password] = is_strong_password(password)

    debug(f"Checked {len(results)} distinct password(s), "
          f"{sum(results.values())} strong")
    return results
