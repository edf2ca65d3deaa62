"""
Secure password generator for the Password Security Toolkit.
"""

import secrets
import string

from password_toolkit.utils.exceptions import InvalidPasswordLengthError

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()-_=+[]{}|;:',.<>?/"

REQUIRED_CLASSES = (UPPERCASE, LOWERCASE, DIGITS, SPECIAL_CHARACTERS)
ALL_CHARACTERS = "".join(REQUIRED_CLASSES)
MIN_PASSWORD_LENGTH = len(REQUIRED_CLASSES)

# SystemRandom reads from the OS CSPRNG and keeps no state, so one instance
# can be shared between threads.
_system_random = secrets.SystemRandom()


def generate_password(length: int = 12) -> str:
    """Generate a random password with at least one character of each class

    Args:
        length: Total number of characters (minimum 4)

    Returns:
        A password containing at least one uppercase letter, one lowercase
        letter, one digit, and one special character

    Raises:
        InvalidPasswordLengthError: If length is below 4
    """
    if length < MIN_PASSWORD_LENGTH:
        raise InvalidPasswordLengthError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long, got {length}"
        )

    password_chars = [secrets.choice(char_class) for char_class in REQUIRED_CLASSES]
    password_chars.extend(secrets.choice(ALL_CHARACTERS) for _ in range(length - MIN_PASSWORD_LENGTH))

    # Shuffle so the guaranteed characters are not always first
    _system_random.shuffle(password_chars)

    return "".join(password_chars)
