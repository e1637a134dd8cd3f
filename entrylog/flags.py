from __future__ import annotations

from typing import Iterable


def parse_flag(token: str) -> tuple[str, str]:
    if token.startswith("--"):
        token = token[2:]
    key, *rest = token.split("=")
    return key, "=".join(rest)


def parse_flags(argv: Iterable[str]) -> dict[str, str]:
    """Map ``--key=value`` tokens to ``{key: value}``.

    Values keep any further ``=`` characters. Nothing is rejected here;
    missing or malformed flags are reported by the validator.
    """
    flags: dict[str, str] = {}
    for token in argv:
        key, value = parse_flag(token)
        flags[key] = value
    return flags
