# src/command_copy/placeholders/scanner.py

import re

# $name or ${name}; group 1 is the braced name, group 2 the bare one.
PLACEHOLDER_PATTERN = re.compile(r"\$(?:\{(\w+)\}|(\w+))")


def scan_placeholders(code: str) -> list[str]:
    """Return the user-fillable placeholder names in first-occurrence order.

    Names starting with an underscore, a digit or an uppercase letter are
    left out: those are shell specials and environment variables such as
    ``$_``, ``$1`` and ``$HOME``.

    Example:
        >>> scan_placeholders("echo $foo ${bar} $_skip $1x $Up $foo")
        ['foo', 'bar']
    """
    found: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(code):
        name = match.group(1) or match.group(2)
        if is_user_variable(name):
            found.setdefault(name)
    return list(found)


def is_user_variable(name: str) -> bool:
    first = name[0]
    return not (first == "_" or first.isdigit() or first.isupper())
