"""Truthiness rules for ``{{#if}}`` conditions.

Python's own ``bool()`` is close but not identical: these rules are
fixed by value kind, so an arbitrary object is truthy even if it defines
``__len__`` or ``__bool__``.

    | value kind              | truthy iff          |
    |-------------------------|---------------------|
    | UNDEFINED / None        | never               |
    | bool                    | its own value       |
    | str                     | non-empty           |
    | number                  | != 0 (NaN truthy)   |
    | sequence / set          | non-empty           |
    | mapping                 | at least one key    |
    | anything else           | always              |

"""

from __future__ import annotations

from collections.abc import Mapping, Set
from numbers import Number
from typing import Any

from curly.template.helpers import is_sequence, is_undefined


def is_truthy(value: Any) -> bool:
    if value is None or is_undefined(value):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value != ""
    if isinstance(value, Number):
        # NaN != 0 holds, and -0.0 == 0 holds.
        try:
            return bool(value != 0)
        except ArithmeticError:
            # Signaling NaN (Decimal("sNaN")) refuses comparison.
            return True
    if is_sequence(value) or isinstance(value, (Set, Mapping)):
        return len(value) > 0
    return True
