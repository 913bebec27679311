"""Swagger model schemas built from remote class definitions."""
from typing import Any, Dict, Iterable

from .types import item_type, map_type


def format_property(name: str, prop) -> Dict[str, Any]:
    swagger_type = map_type(prop.type)
    formatted: Dict[str, Any] = {"type": swagger_type, "required": prop.required}
    if swagger_type == "array":
        formatted["items"] = {"type": item_type(prop.type)}
    return {name: formatted}


def build_model(cls) -> Dict[str, Any]:
    """Create a Swagger model description from a `ClassDescriptor`.

    Returns ``{cls.name: schema}`` so results can be merged into a registry.
    """
    properties: Dict[str, Any] = {}
    for name, prop in cls.properties.items():
        properties.update(format_property(name, prop))
    return {
        cls.name: {
            "id": cls.name,
            "required": [name for name, prop in cls.properties.items() if prop.required],
            "properties": properties,
        }
    }


def build_models(classes: Iterable) -> Dict[str, Any]:
    # duplicate class names: last one wins
    models: Dict[str, Any] = {}
    for cls in classes:
        models.update(build_model(cls))
    return models


__all__ = ["format_property", "build_model", "build_models"]
