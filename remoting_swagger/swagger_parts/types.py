"""Declared-type ingestion and the Swagger 1.2 type mapper.

Remoting metadata declares types in several styles: Python classes (``int``,
``datetime``), type names (``'number'``, ``'Widget'``), one-element lists
meaning "array of X" (``['string']``) or typing generics (``list[int]``).
`resolve_type` folds all of them into a small tagged variant once, at
ingestion; `map_type` then only has to look at the tag.
"""
import datetime
import decimal
import typing
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Scalar:
    name: str


@dataclass(frozen=True)
class ArrayOf:
    # None when the element type was not declared
    element: Optional["DeclaredType"] = None


@dataclass(frozen=True)
class Unknown:
    pass


# None stands for "no type declared" (void)
DeclaredType = Union[Scalar, ArrayOf, Unknown, None]

_PYTHON_TYPES = {
    bytes: "buffer",
    bytearray: "buffer",
    datetime.date: "date",
    datetime.datetime: "date",
    int: "number",
    float: "number",
    decimal.Decimal: "number",
    str: "string",
    dict: "object",
    typing.Any: "any",
}

_ARRAY_TYPES = (list, tuple)

_SWAGGER_NAMES = {
    "buffer": "byte",
    "date": "Date",
    "number": "double",
    "string": "string",
    "any": "any",
    "object": "object",
}


def resolve_type(declared: Any) -> DeclaredType:
    """Resolve a raw declared type into its tagged form. Idempotent."""
    if declared is None or isinstance(declared, (Scalar, ArrayOf, Unknown)):
        return declared
    if isinstance(declared, str):
        if not declared:
            return None
        if declared == "array":
            return ArrayOf()
        return Scalar(declared)
    if isinstance(declared, _ARRAY_TYPES):
        return ArrayOf(resolve_type(declared[0]) if declared else None)
    if declared in _ARRAY_TYPES:
        return ArrayOf()
    if typing.get_origin(declared) in _ARRAY_TYPES:
        args = typing.get_args(declared)
        return ArrayOf(resolve_type(args[0]) if args else None)
    if isinstance(declared, Hashable) and declared in _PYTHON_TYPES:
        return Scalar(_PYTHON_TYPES[declared])
    return Unknown()


def map_type(declared: Any) -> str:
    """Map a declared type (raw or resolved) to a Swagger dataType name.

    Total over all inputs: unknown values become ``object``, missing ones
    ``void``, and unrecognised type names are kept verbatim as model
    references.
    """
    resolved = resolve_type(declared)
    if resolved is None:
        return "void"
    if isinstance(resolved, ArrayOf):
        return "array"
    if isinstance(resolved, Scalar):
        return _SWAGGER_NAMES.get(resolved.name, resolved.name)
    return "object"


def item_type(declared: Any) -> str:
    """Swagger type of the elements of an array type, ``object`` if unknown."""
    resolved = resolve_type(declared)
    if isinstance(resolved, ArrayOf) and resolved.element is not None:
        return map_type(resolved.element)
    return "object"


__all__ = ["Scalar", "ArrayOf", "Unknown", "DeclaredType", "resolve_type", "map_type", "item_type"]
