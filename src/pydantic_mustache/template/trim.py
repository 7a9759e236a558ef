"""Whitespace trimming for tag contents.

Only the ASCII space character is trimmed. Tabs and newlines inside a tag are
part of its key.
"""

SPACE = " "


def trim_head(text: str) -> str:
    """Remove leading spaces."""
    return text.lstrip(SPACE)


def trim_tail(text: str) -> str:
    """Remove trailing spaces."""
    return text.rstrip(SPACE)


def trim(text: str) -> str:
    """Remove spaces from both edges, keeping interior spaces."""
    return text.strip(SPACE)
