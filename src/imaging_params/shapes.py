"""Runtime shape checks used when reading values back out of a snapshot.

A shape is a class, a tuple of classes, or a union such as ``int | str``.
"""

from __future__ import annotations

import types
from typing import Any, Union, get_args, get_origin

Shape = type | tuple | types.UnionType


def shape_classes(shape: Shape) -> tuple[type, ...]:
    """Flatten a shape expression into the classes it accepts."""
    if isinstance(shape, tuple):
        classes: list[type] = []
        for member in shape:
            classes.extend(shape_classes(member))
        return tuple(classes)
    if isinstance(shape, types.UnionType) or get_origin(shape) is Union:
        return shape_classes(get_args(shape))
    if shape is Any:
        raise TypeError("Unsupported shape Any; use object to accept every value")
    if shape is None:
        return (type(None),)
    if isinstance(shape, type) and get_origin(shape) is None:
        return (shape,)
    raise TypeError(f"Unsupported shape {shape!r}; use a class, a tuple of classes or a union")


def matches_shape(value: object, shape: Shape) -> bool:
    classes = shape_classes(shape)
    # bool subclasses int, but a stored flag is not an integer parameter
    if isinstance(value, bool):
        return any(issubclass(bool, c) and c is not int for c in classes)
    return isinstance(value, classes)


def describe_shape(shape: Shape) -> str:
    return " | ".join(c.__name__ for c in shape_classes(shape))


def describe_value(value: object) -> str:
    return type(value).__name__
