from email_validator import EmailNotValidError, validate_email


def is_valid_email(value: str) -> bool:
    """Syntax-only check (no DNS lookups)."""
    if not value or not value.strip():
        return False
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def all_fields_present(*values: str) -> bool:
    return all(bool(v) for v in values)
