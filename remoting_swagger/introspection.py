"""Build remote class descriptors from SQLAlchemy declarative models.

Usage:
    from remoting_swagger.introspection import classes_from_declarative
    registry = RemoteRegistry(classes=classes_from_declarative(Base), routes=routes)

Each mapped class becomes a `ClassDescriptor`:
  name: the Python class name
  http_path: '/<__tablename__>'
  properties: one per mapped column, typed from the column's python_type
  shared_ctor: the primary key as a path argument (used by instance methods)
               plus the first line of the class docstring as description
"""
from __future__ import annotations
import inspect
from typing import Any, List, Optional, Tuple

from sqlalchemy import inspect as sa_inspect

from .registry import AcceptedParam, ClassDescriptor, PropertyDefinition, SharedCtor


def _column_type(column) -> Any:
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        # custom/user-defined column types do not always expose one
        return 'any'
    if python_type is bool:
        # Swagger 1.2 primitive, passed through the type mapper as a name
        return 'boolean'
    return python_type


def _is_required(column) -> bool:
    return (
        not column.nullable
        and not column.primary_key
        and column.default is None
        and column.server_default is None
    )


def _summary(cls) -> Optional[str]:
    doc = inspect.getdoc(cls) if cls.__doc__ else None
    return doc.splitlines()[0] if doc else None


def describe_mapped_class(cls) -> ClassDescriptor:
    mapper = sa_inspect(cls)
    properties = {}
    for attr in mapper.column_attrs:
        column = attr.columns[0]
        properties[attr.key] = PropertyDefinition(type=_column_type(column), required=_is_required(column))

    accepts = tuple(
        AcceptedParam(name=mapper.get_property_by_column(col).key, type=_column_type(col), required=True, http_source='path')
        for col in mapper.primary_key
    )
    description = _summary(cls)
    shared_ctor = SharedCtor(accepts=accepts, description=description) if (accepts or description) else None

    table_name = getattr(cls, '__tablename__', None) or cls.__name__
    return ClassDescriptor(
        name=cls.__name__,
        http_path=f'/{table_name}',
        properties=properties,
        shared_ctor=shared_ctor,
    )


def classes_from_declarative(base) -> Tuple[ClassDescriptor, ...]:
    """Describe every class mapped on `base`'s registry, sorted by class name."""
    mapped: List[type] = sorted((m.class_ for m in base.registry.mappers), key=lambda c: c.__name__)
    return tuple(describe_mapped_class(cls) for cls in mapped)


__all__ = ['describe_mapped_class', 'classes_from_declarative']
