# commonlogging/formatting.py
from typing import Any

PLACEHOLDER = "{}"


def format_message(template: str, *args: Any) -> str:
    """
    Fill `{}` placeholders left to right, one argument per placeholder.
    None renders as "null"; surplus arguments or placeholders are left alone.
    """
    if not args:
        return template
    result = template
    for arg in args:
        result = result.replace(PLACEHOLDER, "null" if arg is None else str(arg), 1)
    return result
