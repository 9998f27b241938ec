# src/command_copy/placeholders/materializer.py

import logging
import re
from collections.abc import Mapping
from typing import Literal

from .scanner import PLACEHOLDER_PATTERN

logger = logging.getLogger(__name__)

Strategy = Literal["substitution", "assignment"]

DEFAULT_STRATEGY: Strategy = "substitution"


def resolve_strategy(value: str | None) -> Strategy:
    """Normalize a configured strategy name.

    Anything other than ``"assignment"`` means substitution, including
    unknown names. This fallback is intentional and never raises.
    """
    if value == "assignment":
        return "assignment"
    if value not in (None, DEFAULT_STRATEGY):
        logger.debug("Unknown strategy %r, using %s", value, DEFAULT_STRATEGY)
    return DEFAULT_STRATEGY


def substitute(code: str, values: Mapping[str, str]) -> str:
    """Replace every ``$name`` and ``${name}`` for the names in ``values``.

    One left-to-right pass: inserted values are never scanned again, so a
    value containing ``$other`` stays literal. Values are inserted as-is,
    without quoting. Callers must treat the result as untrusted shell text.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1) or match.group(2)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace, code)


def assign(code: str, values: Mapping[str, str]) -> str:
    """Prefix ``code`` with one shell assignment per value.

    Values containing a space are double-quoted. Clauses follow the
    iteration order of ``values``. With no values the code is returned
    unchanged.
    """
    if not values:
        return code
    prefix = "".join(_assignment(name, value) for name, value in values.items())
    return f"{prefix}\n{code}"


def _assignment(name: str, value: str) -> str:
    if " " in value:
        return f'{name}="{value}"; '
    return f"{name}={value}; "


def materialize(
    code: str,
    values: Mapping[str, str],
    strategy: str | None = DEFAULT_STRATEGY,
) -> str:
    if resolve_strategy(strategy) == "assignment":
        return assign(code, values)
    return substitute(code, values)
