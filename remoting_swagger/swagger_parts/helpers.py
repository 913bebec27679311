"""Helper functions for the Swagger builder.

Small pure functions shared by the model, operation and document builders.
"""
import re
from typing import Any, Dict, Optional, Set

_ABSOLUTE_URL = re.compile(r"^https?://")


def convert_verb(verb: str) -> str:
    lowered = verb.lower()
    if lowered == "all":
        return "POST"
    if lowered == "del":
        return "DELETE"
    return verb.upper()


def convert_path_fragments(path: str) -> str:
    """Rewrite ``:name`` path fragments into Swagger ``{name}`` placeholders."""
    return "/".join(
        "{" + fragment[1:] + "}" if fragment.startswith(":") else fragment
        for fragment in path.split("/")
    )


def path_placeholders(path: str) -> Set[str]:
    return {fragment[1:] for fragment in path.split("/") if fragment.startswith(":")}


def is_absolute_url(path: Optional[str]) -> bool:
    return bool(_ABSOLUTE_URL.match(path or ""))


def resolve_base_path(configured: Optional[str], origin: Optional[str] = None) -> str:
    """Compute the ``basePath`` a document is served with.

    An absolute configured base path always wins. Otherwise the request
    origin (``scheme://host``) is prepended when one is known.
    """
    configured = configured or ""
    if not origin or is_absolute_url(configured):
        return configured
    return origin + configured


def compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None, keeping insertion order."""
    return {k: v for k, v in data.items() if v is not None}


__all__ = [
    "convert_verb",
    "convert_path_fragments",
    "path_placeholders",
    "is_absolute_url",
    "resolve_base_path",
    "compact",
]
