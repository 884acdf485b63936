"""Naming of payload types for definition references."""

import typing
from typing import Any

SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


def name_for_type(model: Any) -> str:
    """Return the definition key for a payload type, e.g. 'models.Sample'.

    Accepts a class, a generic alias such as ``list[Sample]``, an instance
    or an already-resolved name. Sequences are named after their element
    type. Returns an empty string when nothing can be resolved.
    """
    if model is None:
        return ""
    if isinstance(model, str):
        return model

    origin = typing.get_origin(model)
    if origin is not None:
        args = typing.get_args(model)
        if origin in SEQUENCE_ORIGINS and args:
            return name_for_type(args[0])
        return name_for_type(origin)

    if not isinstance(model, type):
        if isinstance(model, SEQUENCE_ORIGINS):
            return name_for_type(type(next(iter(model)))) if model else ""
        return name_for_type(type(model))

    module = model.__module__
    if module == "builtins":
        return model.__name__
    return f"{module.rsplit('.', 1)[-1]}.{model.__name__}"
