# session_auth/shared/utils/input_validation.py

import re
from typing import Optional, Tuple, Dict


class InputValidator:
    """
    Validation of registration input, complementing the Pydantic schemas.
    """

    # Limits
    MIN_NAME_LENGTH = 3
    MAX_NAME_LENGTH = 20
    MIN_PASSWORD_LENGTH = 8
    MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything beyond this
    MAX_EMAIL_LENGTH = 255

    # Letters (accented included), spaces, hyphens, apostrophes and dots
    NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s\-'.]+$")
    EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
    # Potentially dangerous characters in common input
    DANGEROUS_CHARS = re.compile(r'[<>";%{}\[\]]')
    SPECIAL_CHARS = re.compile(r"[^A-Za-z0-9]")

    @classmethod
    def validate_name(cls, name: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate a first name.

        Args:
            name: String to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not name or not name.strip():
            return False, "First name is required"

        name = name.strip()
        if len(name) < cls.MIN_NAME_LENGTH or len(name) > cls.MAX_NAME_LENGTH:
            return False, (
                f"First name must have between {cls.MIN_NAME_LENGTH} "
                f"and {cls.MAX_NAME_LENGTH} characters"
            )

        if cls.DANGEROUS_CHARS.search(name):
            return False, "First name contains characters that are not allowed"

        if not cls.NAME_PATTERN.match(name):
            return False, "First name contains invalid characters"

        return True, None

    @classmethod
    def validate_email(cls, email: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate email format and length.

        Args:
            email: Email to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not email:
            return False, "Email is required"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email is too long (maximum {cls.MAX_EMAIL_LENGTH} characters)"

        if not cls.EMAIL_PATTERN.match(email):
            return False, "Invalid email"

        return True, None

    @classmethod
    def validate_password(cls, password: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate password strength.

        Args:
            password: Password to validate

        Returns:
            Tuple (valid, error_message)
        """
        if not password:
            return False, "Password is required"

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Password must have at least {cls.MIN_PASSWORD_LENGTH} characters"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
            return False, f"Password is too long (maximum {cls.MAX_PASSWORD_BYTES} bytes)"

        if not (
                any(c.islower() for c in password)
                and any(c.isupper() for c in password)
                and any(c.isdigit() for c in password)
                and cls.SPECIAL_CHARS.search(password)
        ):
            return False, "Weak password: use upper and lower case letters, a number and a symbol"

        return True, None

    @classmethod
    def validate_registration(
            cls,
            first_name: Optional[str],
            email_id: Optional[str],
            password: Optional[str],
    ) -> Dict[str, str]:
        """
        Validate every registration field.

        Returns:
            Mapping of field name to error message (empty if everything is ok)
        """
        errors = {}
        for field, (is_valid, error_msg) in (
                ("firstName", cls.validate_name(first_name)),
                ("emailId", cls.validate_email(email_id)),
                ("password", cls.validate_password(password)),
        ):
            if not is_valid:
                errors[field] = error_msg
        return errors
