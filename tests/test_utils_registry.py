"""Registry fixtures shared by the builder, route and CLI tests.

`SAMPLE_SNAPSHOT` mirrors what the remoting framework exports: two classes
(Widget with a shared constructor, User without) and a handful of routes,
including one that points at a class that does not exist.
"""
import copy
from typing import Any, Dict
from remoting_swagger.registry import RemoteRegistry

SAMPLE_SNAPSHOT: Dict[str, Any] = {
    'classes': [
        {
            'name': 'Widget',
            'http': {'path': '/widgets'},
            'properties': {
                'name': {'type': 'string', 'required': True},
                'tags': {'type': ['string']},
                'price': {'type': 'number'},
                'created': {'type': 'date'},
                'blob': {'type': 'buffer'},
                'owner': {'type': 'User'},
            },
            'sharedCtor': {
                'description': 'A widget',
                'accepts': [
                    {'arg': 'id', 'type': 'any', 'required': True, 'description': 'Widget id', 'http': {'source': 'path'}},
                ],
            },
        },
        {
            'name': 'User',
            'http': {'path': '/users'},
            'properties': {
                'email': {'type': 'string', 'required': True},
            },
        },
    ],
    'routes': [
        {
            'method': 'Widget.find',
            'path': '/widgets',
            'verb': 'get',
            'accepts': [{'arg': 'filter', 'type': 'object', 'description': 'Filter'}],
            'returns': [{'arg': 'data', 'type': ['Widget'], 'root': True}],
            'description': 'Find widgets',
        },
        {
            'method': 'Widget.findById',
            'path': '/widgets/:id',
            'verb': 'get',
            'accepts': [{'arg': 'id', 'type': 'any', 'required': True}],
            'returns': {'arg': 'data', 'type': 'object', 'root': True},
        },
        {
            'method': 'Widget.prototype.updateAttributes',
            'path': '/widgets/:id',
            'verb': 'put',
            'accepts': [{'arg': 'data', 'type': 'object', 'http': {'source': 'body'}}],
            'returns': [{'arg': 'data', 'type': 'object', 'root': True}],
        },
        {
            'method': 'Widget.deleteById',
            'path': '/widgets/:id',
            'verb': 'del',
            'accepts': [{'arg': 'id', 'type': 'any', 'required': True}],
        },
        {
            'method': 'Widget.echo',
            'path': '/widgets/echo',
            'verb': 'all',
            'accepts': [{'arg': 'msg', 'type': 'string'}],
            'returns': [{'arg': 'msg', 'type': 'string'}],
        },
        {
            'method': 'User.login',
            'path': '/users/login',
            'verb': 'post',
            'accepts': [{'arg': 'credentials', 'type': 'object', 'required': True, 'http': {'source': 'body'}}],
            'returns': [{'arg': 'accessToken', 'type': 'token', 'root': True}],
        },
        {
            'method': 'Ghost.find',
            'path': '/ghosts',
            'verb': 'get',
        },
    ],
}


def sample_snapshot() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_SNAPSHOT)


def sample_registry() -> RemoteRegistry:
    return RemoteRegistry.from_dict(sample_snapshot())
