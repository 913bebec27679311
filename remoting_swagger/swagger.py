"""Public import for the Swagger builder.

Keeps a stable import path while the implementation lives in
`swagger_builder.py`.
"""
from .swagger_builder import build_swagger_docs  # noqa: F401
from .swagger_parts.documents import Document, SwaggerDocs  # noqa: F401
from .swagger_parts.helpers import convert_path_fragments, convert_verb  # noqa: F401
from .swagger_parts.models import build_model  # noqa: F401
from .swagger_parts.operations import accept_to_parameter, route_to_operation  # noqa: F401
from .swagger_parts.types import map_type  # noqa: F401

__all__ = [
    "build_swagger_docs",
    "Document",
    "SwaggerDocs",
    "convert_path_fragments",
    "convert_verb",
    "build_model",
    "accept_to_parameter",
    "route_to_operation",
    "map_type",
]
