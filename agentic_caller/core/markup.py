"""
Escaping helpers for embedding text inside TwiML / SSML documents.
"""

from xml.sax.saxutils import escape, unescape

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_QUOTE_ENTITIES_REVERSE = {v: k for k, v in _QUOTE_ENTITIES.items()}


def escape_for_markup(text: str) -> str:
    """Replace &, quotes and angle brackets with their XML entities."""
    return escape(text, _QUOTE_ENTITIES)


def unescape_markup(text: str) -> str:
    """Inverse of escape_for_markup."""
    return unescape(text, _QUOTE_ENTITIES_REVERSE)
