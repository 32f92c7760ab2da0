"""Session identifier generation."""

import secrets

SESSION_ID_BYTES = 16


def generate_session_id() -> str:
    """Return a random 32-character hex identifier (128 bits of entropy)."""
    return secrets.token_hex(SESSION_ID_BYTES)
