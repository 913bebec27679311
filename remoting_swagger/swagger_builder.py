"""Swagger 1.2 document builder for remoting registries.

One pass over a `RemoteRegistry` produces:
- the resource listing (``/<name>/resources``)
- the static OAuth and batch declarations (``/<name>/oauth``, ``/<name>/batch``)
- one API declaration per remote class (``/<name><class http path>``)
- the model registry shared by the declarations

This is the canonical builder module; `remoting_swagger/swagger.py` re-exports
from here.
"""
import copy
import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from .config.swagger import SwaggerOptions
from .registry import RemoteRegistry
from .swagger_parts.constants import (
    BATCH_APIS,
    OAUTH_APIS,
    RESOURCE_AUTHORIZATIONS,
    SWAGGER_VERSION,
    TOKEN_MODEL,
    TOKENINFO_MODEL,
)
from .swagger_parts.documents import Document, SwaggerDocs
from .swagger_parts.helpers import compact
from .swagger_parts.models import build_models
from .swagger_parts.operations import route_to_api

__all__ = ["build_swagger_docs"]

logger = logging.getLogger(__name__)


def _build_model_registry(registry: RemoteRegistry, models: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if models is None:
        merged = build_models(registry.classes)
    else:
        merged = copy.deepcopy(dict(models))
    merged["token"] = copy.deepcopy(TOKEN_MODEL)
    merged["tokeninfo"] = copy.deepcopy(TOKENINFO_MODEL)
    return merged


def _class_apis(registry: RemoteRegistry) -> Dict[str, List[Dict[str, Any]]]:
    apis: Dict[str, List[Dict[str, Any]]] = {cls.name: [] for cls in registry.classes}
    skipped = 0
    for route in registry.routes:
        target = apis.get(route.class_name)
        if target is None:
            logger.error("Route exists with no class: %s %s (%s)", route.verb, route.path, route.method)
            skipped += 1
            continue
        cls = registry.find_class(route.class_name)
        ctor = cls.shared_ctor
        if route.is_instance_method and ctor and ctor.accepts:
            route = replace(route, accepts=route.accepts + ctor.accepts)
        target.append(route_to_api(route, cls.name))
    if skipped:
        logger.warning("Skipped %d route(s) without a known class", skipped)
    return apis


def build_swagger_docs(
    registry: RemoteRegistry,
    options: Optional[SwaggerOptions] = None,
    models: Optional[Mapping[str, Any]] = None,
) -> SwaggerDocs:
    """Build every Swagger document for `registry`.

    `models` replaces the model registry derived from the registry classes;
    the ``token`` and ``tokeninfo`` models are added either way.
    """
    options = options or SwaggerOptions()
    name = options.name
    model_registry = _build_model_registry(registry, models)
    header = compact({"apiVersion": options.version, "swaggerVersion": SWAGGER_VERSION})

    resource_apis: List[Dict[str, Any]] = [{"path": f"/{name}/oauth"}, {"path": f"/{name}/batch"}]
    for cls in registry.classes:
        resource_apis.append(compact({
            "path": f"/{name}{cls.http_path}",
            "description": cls.shared_ctor.description if cls.shared_ctor else None,
        }))

    resources = Document(
        operation_id=f"{name}.resources",
        endpoint="resources",
        path="/resources",
        base_path=options.base_path,
        body={
            **header,
            "basePath": options.base_path,
            "apis": resource_apis,
            "authorizations": copy.deepcopy(RESOURCE_AUTHORIZATIONS),
        },
    )
    oauth = Document(
        operation_id=f"{name}.oauth",
        endpoint="oauth",
        path="/oauth",
        body={
            **header,
            "basePath": "",
            "resourcePath": "/oauth",
            "apis": copy.deepcopy(OAUTH_APIS),
            "models": model_registry,
        },
    )
    batch = Document(
        operation_id=f"{name}.batch",
        endpoint="batch",
        path="/batch",
        body={
            **header,
            "basePath": "",
            "resourcePath": "/batch",
            "apis": copy.deepcopy(BATCH_APIS),
        },
    )

    class_apis = _class_apis(registry)
    api_docs: Dict[str, Document] = {}
    for cls in registry.classes:
        api_docs[cls.name] = Document(
            operation_id=f"{name}.{cls.name}",
            endpoint=f"api_{cls.name}",
            path=cls.http_path,
            base_path=options.base_path,
            body={
                **header,
                "basePath": options.base_path,
                "resourcePath": cls.http_path,
                "apis": class_apis[cls.name],
                "models": model_registry,
            },
        )

    logger.info(
        "Built Swagger documents for %d class(es), %d model(s)",
        len(api_docs), len(model_registry),
    )
    return SwaggerDocs(
        name=name,
        resources=resources,
        oauth=oauth,
        batch=batch,
        apis=api_docs,
        models=model_registry,
    )
