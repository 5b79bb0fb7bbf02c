from __future__ import annotations

from urllib.parse import parse_qsl


def params_to_object(query: str) -> dict[str, str | list[str]]:
    """
    Parse a URL query string into a dict.

    A key seen once maps to its value; a repeated key collects its values
    into a list, in order of appearance.

    >>> params_to_object("a=1&a=2&b=3")
    {'a': ['1', '2'], 'b': '3'}
    """
    result: dict[str, str | list[str]] = {}
    for key, value in parse_qsl(query.removeprefix("?"), keep_blank_values=True):
        if key not in result:
            result[key] = value
            continue
        existing = result[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            result[key] = [existing, value]
    return result
