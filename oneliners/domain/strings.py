import re

_ABSOLUTE_PATH_RE = re.compile(r"^([a-z]+:)?[\\/]", re.IGNORECASE)


def is_relative(path: str) -> bool:
    """True unless the path starts with a separator, optionally after a scheme such as ``C:``."""
    return _ABSOLUTE_PATH_RE.match(path) is None


def convert_to_uppercase(text: str, pos: int) -> str:
    """Uppercase the character at ``pos``. Out-of-range positions leave the text as is."""
    if not 0 <= pos < len(text):
        return text
    return f"{text[:pos]}{text[pos].upper()}{text[pos + 1:]}"


def convert_to_lowercase(text: str, pos: int) -> str:
    """Lowercase the character at ``pos``. Out-of-range positions leave the text as is."""
    if not 0 <= pos < len(text):
        return text
    return f"{text[:pos]}{text[pos].lower()}{text[pos + 1:]}"


def repeat_string(text: str, count: int) -> str:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return text * count
