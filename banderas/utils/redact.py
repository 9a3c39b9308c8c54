"""Helpers for keeping personal data out of log lines."""

from typing import Optional


def mask_email(email: Optional[str]) -> str:
    """Keep the first character of the local part and the domain.

    >>> mask_email("jefatura@liceocostarica.ed.cr")
    'j***@liceocostarica.ed.cr'
    """
    if not email:
        return "<none>"
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"
