"""Anonymous session ids and the daily-usage date key."""
import secrets
import string
from datetime import datetime, timezone

_ALPHABET = string.digits + string.ascii_lowercase
SESSION_ID_LENGTH = 26


def generate_session_id() -> str:
    """Random lowercase base-36 id for anonymous sessions."""
    return "".join(secrets.choice(_ALPHABET) for _ in range(SESSION_ID_LENGTH))


def get_today_date() -> str:
    """Today's date (UTC) as YYYY-MM-DD, used to bucket daily limits."""
    return datetime.now(timezone.utc).date().isoformat()
