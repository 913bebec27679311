"""Modular pieces for the Swagger document builder.

This package holds the type mapper, translators and static content that the
main builder imports to keep the document assembly readable.
"""

__all__ = [
    "constants",
    "documents",
    "helpers",
    "models",
    "operations",
    "types",
]
