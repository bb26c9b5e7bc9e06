"""Naming convention conversion.

    user_name -> userName   (to_camel_case)
    userName  -> user_name  (to_underscore_name)

Round trips hold for lowercase underscore names whose segments start with a
letter, and for camelCase names without consecutive capitals.
"""

from __future__ import annotations

import re
from functools import lru_cache

# An uppercase letter that is not the first character
_UPPER_PATTERN = re.compile(r"(?<!^)([A-Z])")


@lru_cache(maxsize=1024)
def to_camel_case(name: str) -> str:
    """Convert an underscore-separated name to camelCase.

    Leading underscores are kept as-is so private names stay private.
    """
    stripped = name.lstrip("_")
    prefix = name[: len(name) - len(stripped)]
    head, *rest = stripped.split("_")
    return prefix + head + "".join(part[:1].upper() + part[1:] for part in rest)


@lru_cache(maxsize=1024)
def to_underscore_name(name: str) -> str:
    """Convert a camelCase name to underscore-separated lowercase."""
    return _UPPER_PATTERN.sub(r"_\1", name).lower()


def candidate_names(name: str) -> list[str]:
    """Names tried in order when resolving a property: verbatim, camelCase, underscore."""
    candidates = [name]
    for converted in (to_camel_case(name), to_underscore_name(name)):
        if converted not in candidates:
            candidates.append(converted)
    return candidates
