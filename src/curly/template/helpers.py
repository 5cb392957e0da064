"""Value helpers used while rendering.

Path resolution, property access on record-like values, and conversion
of resolved values to output text. None of these functions close over
Environment state; they use only their parameters.

Thread-Safety:
All functions are stateless and never mutate the values they inspect.

"""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

logger = logging.getLogger(__name__)


class _Undefined:
    """Sentinel for a path that did not resolve.

    Stringifies as ``""`` and is falsy, so it renders like a missing
    value, but it is distinct from ``None`` so callers can tell "the key
    holds null" from "there is no such key".
    """

    __slots__ = ()

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __iter__(self):
        return iter(())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Undefined)

    def __hash__(self) -> int:
        return hash(_Undefined)


UNDEFINED = _Undefined()


def is_undefined(value: Any) -> bool:
    return isinstance(value, _Undefined)


def is_sequence(value: Any) -> bool:
    """True for ordered sequences other than text (``str``, ``bytes``)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def read_property(obj: Any, name: str) -> Any:
    """Read a public data attribute from a non-mapping value.

    Dataclass fields, named tuple fields, properties and plain instance
    attributes are readable. Private names (leading underscore) and
    routines such as bound methods are not, so ``{{ title.upper }}`` on a
    string resolves to nothing rather than to a method object.

    A property getter that raises counts as a missing property.

    Returns:
        The attribute value, or ``UNDEFINED``.
    """
    if obj is None or isinstance(obj, _Undefined) or name.startswith("_"):
        return UNDEFINED
    try:
        value = getattr(obj, name)
    except AttributeError:
        return UNDEFINED
    except Exception as e:
        logger.debug(f"Reading '{name}' on {type(obj).__name__} failed: {e!r}")
        return UNDEFINED
    if inspect.isroutine(value):
        return UNDEFINED
    return value


def resolve(path: str, context: Any) -> Any:
    """Resolve a dot-separated path against a context value.

    Each segment is looked up as a key when the current value is a
    mapping and read as a property otherwise. Resolution stops with
    ``UNDEFINED`` at the first segment that cannot be satisfied.

    Example:
        >>> resolve("user.name", {"user": {"name": "Ada"}})
        'Ada'
        >>> resolve("user.email", {"user": {"name": "Ada"}})
        Undefined
    """
    current = context
    for name in path.split("."):
        if isinstance(current, Mapping):
            # Membership test first: subscripting a defaultdict would insert.
            if name not in current:
                return UNDEFINED
            current = current[name]
        else:
            current = read_property(current, name)
            if current is UNDEFINED:
                return UNDEFINED
    return current


def _plain(value: Any, seen: frozenset[int] = frozenset()) -> Any:
    """Convert nested containers to JSON-serializable builtins.

    A container that contains itself renders the back-reference as
    ``"[...]"`` or ``"{...}"``, like ``repr()`` does.
    """
    if isinstance(value, Mapping):
        if id(value) in seen:
            return "{...}"
        inner = seen | {id(value)}
        return {
            k if isinstance(k, str) else to_text(k): _plain(v, inner) for k, v in value.items()
        }
    if is_sequence(value):
        if id(value) in seen:
            return "[...]"
        inner = seen | {id(value)}
        return [_plain(item, inner) for item in value]
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    return to_text(value)


def to_text(value: Any) -> str:
    """Convert a resolved value to output text.

    - ``None`` and ``UNDEFINED`` render as ``""``
    - booleans render lowercase (``true``/``false``)
    - sequences and mappings render as compact JSON
    - everything else renders with ``str()``
    """
    if value is None or isinstance(value, _Undefined):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping) or is_sequence(value):
        return json.dumps(_plain(value), ensure_ascii=False, separators=(",", ":"))
    return str(value)
