# backend/comingsoon/utils/helpers.py
from email_validator import EmailNotValidError, validate_email


def is_valid_syntax(email: str) -> bool:
    # grammar only, no DNS/MX lookups
    if not email or "@" not in email:
        return False
    try:
        validate_email(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def normalize_email(addr: str) -> str:
    """Lowercase the whole address, local part included."""
    if not addr:
        return ""
    return addr.strip().lower()
