"""Workspace ordering.

Named workspaces come first in reverse alphabetical order, followed by
numeric workspaces from the highest number down:

    web, chat, 3, 1

Panels lay their workspace buttons out in exactly this order.
"""

import re
from functools import cmp_to_key

# C long bounds; strtol clamps overflowing input to these values
LONG_MAX = 2 ** 63 - 1
LONG_MIN = -(2 ** 63)

# Same prefix strtol accepts: C-locale whitespace, optional sign, decimal digits
_NUMBER_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def ws_name_to_number(name: str) -> int:
    """Parse a workspace name the way i3 does.

    Positive integers and zero are numbers. Anything else (empty names,
    negative numbers, overflowing numbers, names with trailing text such as
    "3x") is a named workspace and yields -1.

    Args:
        name: Workspace name

    Returns:
        The workspace number, or -1 for named workspaces
    """
    match = _NUMBER_RE.fullmatch(name)
    if match is None:
        return -1

    value = int(match.group(2))
    if match.group(1) == "-":
        value = -value

    if value >= LONG_MAX or value <= LONG_MIN or value < 0:
        return -1

    return value


def compare_names(a: str, b: str) -> int:
    """Compare two workspace names.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if equal
    """
    na = ws_name_to_number(a)
    nb = ws_name_to_number(b)

    if na == -1 or nb == -1:
        if na == -1 and nb == -1:
            return _cmp(b, a)
        return -1 if na == -1 else 1

    return _cmp(nb, na)


def workspace_cmp(a, b) -> int:
    """Compare two workspaces by name (see compare_names)."""
    return compare_names(a.name, b.name)


workspace_sort_key = cmp_to_key(workspace_cmp)
