"""Text parsing utilities for chat messages."""

from __future__ import annotations

# Minimum token length picked up by the rude auto-reply
LONG_WORD_MIN_LEN = 5

# Longest reply word a chat may configure
MAX_WORD_LEN = 20


def extract_usernames(text: str | None) -> list[str]:
    """Return whitespace-separated tokens that look like @usernames.

    Order is preserved and a bare "@" is ignored. Duplicates are kept; the
    roster's primary key takes care of them.
    """
    if not text:
        return []
    return [tok for tok in text.split() if tok.startswith("@") and len(tok) > 1]


def long_words(text: str | None, min_len: int = LONG_WORD_MIN_LEN) -> list[str]:
    """Split on whitespace and keep tokens of at least `min_len` characters."""
    if not text:
        return []
    return [tok for tok in text.split() if len(tok) >= min_len]


def command_args(text: str, command: str) -> str:
    """Return the argument part of a command message.

    The keyword is matched by prefix, so everything after it is arguments.
    A `@botname` suffix glued to the keyword (`/add@my_bot @alice`) is
    dropped first.
    """
    rest = text[len(command):]
    if rest.startswith("@"):
        parts = rest.split(maxsplit=1)
        rest = parts[1] if len(parts) > 1 else ""
    return rest.strip()


def validate_word(word: str) -> str | None:
    """Check a candidate reply word.

    Returns None when the word is acceptable, else one of
    "empty" / "too_long" / "not_alpha".
    """
    if not word:
        return "empty"
    if len(word) > MAX_WORD_LEN:
        return "too_long"
    if not word.isalpha():
        return "not_alpha"
    return None
