from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_NAME = 'swagger'


@dataclass(frozen=True)
class SwaggerOptions:
    name: str = DEFAULT_NAME
    version: Optional[str] = None
    base_path: str = ''


def normalize_swagger_options(name_raw, version_raw, base_path_raw) -> SwaggerOptions:
    name = (name_raw or DEFAULT_NAME).strip('/')
    # the name becomes both a URL segment and a Flask blueprint name
    if not name or '/' in name or '.' in name:
        raise ValueError(f'swagger name must be a single path segment without dots: {name_raw!r}')
    return SwaggerOptions(
        name=name,
        version=str(version_raw) if version_raw not in (None, '') else None,
        base_path=base_path_raw or '',
    )


def options_from_config(config: Mapping[str, Any]) -> SwaggerOptions:
    return normalize_swagger_options(
        config.get('SWAGGER_NAME'),
        config.get('SWAGGER_API_VERSION'),
        config.get('SWAGGER_BASE_PATH'),
    )
