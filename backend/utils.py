import textwrap


def normalize_indentation(text: str) -> str:
    """Remove indentation shared by every line and trim surrounding blank space."""
    return textwrap.dedent(text).strip()


def truncate(text: str, max_chars: int = 3000) -> str:
    """Truncate text to max_chars, adding ellipsis if cut."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + "..."
