"""Read-only snapshot of the remoting registry.

The Swagger builder never talks to the remoting framework directly. Callers
hand it a `RemoteRegistry`: an immutable collection of class and route
descriptors, built either in Python, from a JSON snapshot exported by the
framework (`RemoteRegistry.from_dict` / `from_file`), or from SQLAlchemy
models (see `remoting_swagger.introspection`).

Snapshot layout accepted by `from_dict`:

    {
      "classes": [
        {"name": "Widget", "http": {"path": "/widgets"},
         "properties": {"name": {"type": "string", "required": true}},
         "sharedCtor": {"description": "...", "accepts": [...]}}
      ],
      "routes": [
        {"method": "Widget.prototype.rename", "path": "/widgets/:id/rename",
         "verb": "post", "accepts": [...], "returns": [...], "description": "..."}
      ]
    }

Declared types are resolved into `swagger_parts.types` variants as soon as a
descriptor is constructed.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .swagger_parts.types import resolve_type


class RegistryError(ValueError):
    """Raised when a registry snapshot cannot be turned into descriptors."""


@dataclass(frozen=True)
class PropertyDefinition:
    type: Any = None
    required: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'type', resolve_type(self.type))
        object.__setattr__(self, 'required', bool(self.required))


@dataclass(frozen=True)
class AcceptedParam:
    name: str
    type: Any = None
    required: bool = False
    description: Optional[str] = None
    model: Optional[str] = None
    # explicit location hint: 'path', 'query', 'form', 'body', 'header'
    http_source: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'type', resolve_type(self.type))


@dataclass(frozen=True)
class ReturnDescriptor:
    type: Any = None
    name: Optional[str] = None
    root: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'type', resolve_type(self.type))


@dataclass(frozen=True)
class SharedCtor:
    accepts: Tuple[AcceptedParam, ...] = ()
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'accepts', tuple(self.accepts))


@dataclass(frozen=True)
class ClassDescriptor:
    name: str
    http_path: Optional[str] = None
    properties: Mapping[str, PropertyDefinition] = field(default_factory=dict)
    shared_ctor: Optional[SharedCtor] = None

    def __post_init__(self):
        http_path = self.http_path or self.name
        if not http_path.startswith('/'):
            # blueprint rules are joined to the prefix with a slash
            http_path = f'/{http_path}'
        object.__setattr__(self, 'http_path', http_path)
        props = {
            name: p if isinstance(p, PropertyDefinition) else PropertyDefinition(**p)
            for name, p in dict(self.properties).items()
        }
        object.__setattr__(self, 'properties', MappingProxyType(props))


@dataclass(frozen=True)
class RouteDescriptor:
    method: str
    path: str
    verb: str
    accepts: Tuple[AcceptedParam, ...] = ()
    returns: Tuple[ReturnDescriptor, ...] = ()
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'accepts', tuple(self.accepts))
        object.__setattr__(self, 'returns', tuple(self.returns))

    @property
    def class_name(self) -> str:
        return self.method.split('.')[0]

    @property
    def is_instance_method(self) -> bool:
        """True for ``Class.prototype.method`` ids, which need the shared constructor's args."""
        return len(self.method.split('.')) > 2


@dataclass(frozen=True)
class RemoteRegistry:
    classes: Tuple[ClassDescriptor, ...] = ()
    routes: Tuple[RouteDescriptor, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'classes', tuple(self.classes))
        object.__setattr__(self, 'routes', tuple(self.routes))

    def find_class(self, name: str) -> Optional[ClassDescriptor]:
        for cls in self.classes:
            if cls.name == name:
                return cls
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'RemoteRegistry':
        if not isinstance(data, Mapping):
            raise RegistryError('registry snapshot must be an object')
        classes = [_parse_class(raw) for raw in data.get('classes') or []]
        routes = [_parse_route(raw) for raw in data.get('routes') or []]
        return cls(classes=tuple(classes), routes=tuple(routes))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'RemoteRegistry':
        try:
            data = json.loads(Path(path).read_text(encoding='utf-8'))
        except json.JSONDecodeError as exc:
            raise RegistryError(f'{path}: invalid JSON ({exc})') from exc
        return cls.from_dict(data)


def _require(raw: Mapping[str, Any], key: str, owner: str) -> Any:
    if not isinstance(raw, Mapping):
        raise RegistryError(f'{owner} must be an object')
    value = raw.get(key)
    if value in (None, ''):
        raise RegistryError(f'{owner}: missing {key}')
    if not isinstance(value, str):
        raise RegistryError(f'{owner}: {key} must be a string')
    return value


def _optional_mapping(raw: Mapping[str, Any], key: str, owner: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise RegistryError(f'{owner}: {key} must be an object')
    return value


def _description(value: Any) -> Optional[str]:
    # upstream allows multi-line descriptions as a list of lines
    if isinstance(value, (list, tuple)):
        return '\n'.join(str(v) for v in value)
    return value


def _parse_accepts(items: Optional[Iterable[Any]], owner: str) -> Tuple[AcceptedParam, ...]:
    out: List[AcceptedParam] = []
    for raw in items or []:
        if not isinstance(raw, Mapping):
            raise RegistryError(f'{owner}: accepted parameter must be an object')
        name = raw.get('name') or raw.get('arg')
        if not name:
            raise RegistryError(f'{owner}: accepted parameter without a name')
        if not isinstance(name, str):
            raise RegistryError(f'{owner}: accepted parameter name must be a string')
        http = _optional_mapping(raw, 'http', f'{owner} {name}')
        out.append(AcceptedParam(
            name=name,
            type=raw.get('type'),
            required=bool(raw.get('required', False)),
            description=_description(raw.get('description')),
            model=raw.get('model'),
            http_source=http.get('source'),
        ))
    return tuple(out)


def _parse_returns(raw: Any, owner: str) -> Tuple[ReturnDescriptor, ...]:
    if not raw:
        return ()
    if isinstance(raw, Mapping):
        raw = [raw]
    if not all(isinstance(r, Mapping) for r in raw):
        raise RegistryError(f'{owner}: return descriptor must be an object')
    return tuple(
        ReturnDescriptor(type=r.get('type'), name=r.get('arg') or r.get('name'), root=bool(r.get('root', False)))
        for r in raw
    )


def _parse_class(raw: Mapping[str, Any]) -> ClassDescriptor:
    name = _require(raw, 'name', 'class')
    owner = f'class {name}'
    http = _optional_mapping(raw, 'http', owner)
    http_path = http.get('path')
    if http_path is not None and not isinstance(http_path, str):
        raise RegistryError(f'{owner}: http path must be a string')
    props: Dict[str, PropertyDefinition] = {}
    for prop_name, prop in _optional_mapping(raw, 'properties', owner).items():
        if not isinstance(prop, Mapping):
            # shorthand: {"name": "string"}
            prop = {'type': prop}
        props[prop_name] = PropertyDefinition(type=prop.get('type'), required=prop.get('required', False))
    shared_ctor = None
    ctor_raw = _optional_mapping(raw, 'sharedCtor', owner)
    if ctor_raw:
        shared_ctor = SharedCtor(
            accepts=_parse_accepts(ctor_raw.get('accepts'), f'{owner} sharedCtor'),
            description=_description(ctor_raw.get('description')),
        )
    return ClassDescriptor(
        name=name,
        http_path=http_path,
        properties=props,
        shared_ctor=shared_ctor,
    )


def _parse_route(raw: Mapping[str, Any]) -> RouteDescriptor:
    method = _require(raw, 'method', 'route')
    owner = f'route {method}'
    return RouteDescriptor(
        method=method,
        path=_require(raw, 'path', owner),
        verb=_require(raw, 'verb', owner),
        accepts=_parse_accepts(raw.get('accepts'), owner),
        returns=_parse_returns(raw.get('returns'), owner),
        description=_description(raw.get('description')),
    )


__all__ = [
    'RegistryError',
    'PropertyDefinition',
    'AcceptedParam',
    'ReturnDescriptor',
    'SharedCtor',
    'ClassDescriptor',
    'RouteDescriptor',
    'RemoteRegistry',
]
