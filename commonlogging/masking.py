# commonlogging/masking.py
"""
Redaction helpers for values that end up in log lines.

Both functions run on the logging path, so they never raise: absent or
malformed input comes back as a fixed sentinel string instead.
"""
from __future__ import annotations
import re
from typing import Optional

INVALID_EMAIL = "invalid-email-format"
MASKED_DOCUMENT = "***"

EMAIL_RE = re.compile(
    r"[a-zA-Z0-9_+&*-]+(?:\.[a-zA-Z0-9_+&*-]+)*@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,7}"
)


def mask_email(email: Optional[str]) -> str:
    """
    Hide the local part of an email, keeping its first and last character.
      "test.user@pragma.com.co" -> "t***r@pragma.com.co"
      "ab@example.com"          -> "***@example.com"
    """
    if email is None or not EMAIL_RE.fullmatch(email):
        return INVALID_EMAIL
    at = email.index("@")
    local, domain = email[:at], email[at:]
    if len(local) <= 2:
        return "***" + domain
    return f"{local[0]}***{local[-1]}{domain}"


def mask_document(document_id: Optional[str]) -> str:
    """
    Fixed-width redaction of an identity document number.
      "123456"     -> "1****6"
      "1234567890" -> "1****7890"
    """
    if document_id is None or len(document_id) < 6:
        return MASKED_DOCUMENT
    # Exactly six characters only reveals the last one
    if len(document_id) == 6:
        return f"{document_id[0]}****{document_id[-1]}"
    return f"{document_id[0]}****{document_id[-4:]}"
