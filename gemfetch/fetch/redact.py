"""URL redaction utilities for logging."""

from urllib.parse import urlsplit, urlunsplit


REDACTED_VALUE = "[REDACTED]"


def redact_url(url: str) -> str:
    """Redact user input and credentials from a URL.

    Gemini input prompts (1x) return the user's answer in the query
    string, and 11 marks it as sensitive, so the query is always hidden.
    Userinfo is hidden as well.

    Args:
        url: URL that may contain user input or credentials.

    Returns:
        URL safe for logging.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return REDACTED_VALUE

    netloc = parts.netloc
    if "@" in netloc:
        netloc = f"{REDACTED_VALUE}@{netloc.rsplit('@', 1)[1]}"

    query = REDACTED_VALUE if parts.query else ""
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))
