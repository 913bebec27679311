"""Route to Swagger operation translation.

A remoting route (`RouteDescriptor`) becomes one Swagger 1.2 API entry:
``{"path": ..., "operations": [operation]}``. Operations share the same
shape for every route:

- ``httpMethod`` from the route verb (``all`` -> POST, ``del`` -> DELETE)
- ``nickname`` is the method id with dots replaced by underscores, since
  Swagger UI uses it unescaped in jQuery selectors
- ``responseClass`` resolves ``object``/``any`` returns to the owning model
- ``errorResponses`` is always empty and every operation carries the same
  wildcard OAuth2 scope
"""
import copy
from typing import Any, Callable, Dict, Optional

from .constants import OPERATION_AUTHORIZATIONS
from .helpers import compact, convert_path_fragments, convert_verb, path_placeholders
from .types import Scalar, map_type

_MODEL_RETURNS = (Scalar("object"), Scalar("any"))


def accept_to_parameter(route) -> Callable[[Any], Dict[str, Any]]:
    """Return a converter from `AcceptedParam` to Swagger parameter for `route`.

    Parameter location, highest precedence first: the explicit ``http_source``
    hint, ``path`` when the name is a ``:name`` fragment of the route path,
    then ``query`` for GET routes and ``form`` for everything else.
    """
    default_type = "query" if route.verb.lower() == "get" else "form"
    placeholders = path_placeholders(route.path)

    def convert(accepted) -> Dict[str, Any]:
        if accepted.http_source:
            param_type = accepted.http_source
        elif accepted.name in placeholders:
            param_type = "path"
        else:
            param_type = default_type
        return compact({
            "paramType": param_type,
            "name": accepted.name,
            "description": accepted.description,
            "dataType": accepted.model or map_type(accepted.type),
            "required": bool(accepted.required),
            "allowMultiple": False,
        })

    return convert


def response_class(route, model_name: Optional[str]) -> str:
    if not route.returns:
        return "void"
    declared = route.returns[0].type
    if declared in _MODEL_RETURNS:
        return model_name or "any"
    return map_type(declared)


def route_to_operation(route, model_name: Optional[str]) -> Dict[str, Any]:
    to_parameter = accept_to_parameter(route)
    return compact({
        "httpMethod": convert_verb(route.verb),
        "nickname": route.method.replace(".", "_"),
        "responseClass": response_class(route, model_name),
        "parameters": [to_parameter(a) for a in route.accepts],
        "errorResponses": [],
        "summary": route.description,
        "notes": "",
        "authorizations": copy.deepcopy(OPERATION_AUTHORIZATIONS),
    })


def route_to_api(route, model_name: Optional[str]) -> Dict[str, Any]:
    return {
        "path": convert_path_fragments(route.path),
        "operations": [route_to_operation(route, model_name)],
    }


__all__ = ["accept_to_parameter", "response_class", "route_to_operation", "route_to_api"]
