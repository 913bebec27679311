import logging

from remoting_swagger.config.swagger import SwaggerOptions
from remoting_swagger.registry import RemoteRegistry
from remoting_swagger.swagger import build_swagger_docs


def _ops(docs, class_name):
    return [op for api in docs.apis[class_name].body['apis'] for op in api['operations']]


def _op(docs, class_name, nickname):
    return next(op for op in _ops(docs, class_name) if op['nickname'] == nickname)


def test_empty_registry_still_has_static_entries():
    docs = build_swagger_docs(RemoteRegistry())
    apis = docs.resources.body['apis']
    assert apis == [{'path': '/swagger/oauth'}, {'path': '/swagger/batch'}]
    assert 'token' in docs.models
    assert 'tokeninfo' in docs.models
    assert docs.apis == {}
    assert [d.operation_id for d in docs.documents] == ['swagger.resources', 'swagger.oauth', 'swagger.batch']


def test_resource_listing_entries(registry):
    docs = build_swagger_docs(registry, SwaggerOptions(version='1.0', base_path='/api'))
    body = docs.resources.body
    assert body['apiVersion'] == '1.0'
    assert body['swaggerVersion'] == '1.2'
    assert body['basePath'] == '/api'
    assert [a['path'] for a in body['apis']] == ['/swagger/oauth', '/swagger/batch', '/swagger/widgets', '/swagger/users']
    assert body['apis'][2]['description'] == 'A widget'
    assert 'description' not in body['apis'][3]
    assert body['authorizations']['oauth2']['type'] == 'oauth2'


def test_custom_name_prefixes_paths(registry):
    docs = build_swagger_docs(registry, SwaggerOptions(name='api'))
    assert [a['path'] for a in docs.resources.body['apis']][:3] == ['/api/oauth', '/api/batch', '/api/widgets']
    assert docs.get('api.Widget') is docs.apis['Widget']
    assert docs.get('api.resources') is docs.resources
    assert docs.get('swagger.resources') is None


def test_api_version_omitted_when_unset():
    docs = build_swagger_docs(RemoteRegistry())
    assert 'apiVersion' not in docs.resources.body


def test_class_declarations(registry):
    docs = build_swagger_docs(registry, SwaggerOptions(base_path='/api'))
    widget = docs.apis['Widget']
    assert widget.path == '/widgets'
    assert widget.body['resourcePath'] == '/widgets'
    assert widget.body['basePath'] == '/api'
    assert widget.body['models'] is docs.models
    assert [a['path'] for a in widget.body['apis']] == [
        '/widgets', '/widgets/{id}', '/widgets/{id}', '/widgets/{id}', '/widgets/echo',
    ]
    assert _op(docs, 'Widget', 'Widget_find')['responseClass'] == 'array'
    assert _op(docs, 'Widget', 'Widget_findById')['responseClass'] == 'Widget'
    assert _op(docs, 'Widget', 'Widget_deleteById')['httpMethod'] == 'DELETE'
    assert _op(docs, 'Widget', 'Widget_echo')['httpMethod'] == 'POST'
    assert _op(docs, 'Widget', 'Widget_echo')['parameters'][0]['paramType'] == 'form'
    assert _op(docs, 'User', 'User_login')['responseClass'] == 'token'


def test_instance_methods_get_shared_ctor_accepts(registry):
    docs = build_swagger_docs(registry)
    update = _op(docs, 'Widget', 'Widget_prototype_updateAttributes')
    assert [(p['name'], p['paramType']) for p in update['parameters']] == [('data', 'body'), ('id', 'path')]
    assert update['parameters'][1]['description'] == 'Widget id'
    # static methods are left alone
    find_by_id = _op(docs, 'Widget', 'Widget_findById')
    assert [p['name'] for p in find_by_id['parameters']] == ['id']
    # the registry snapshot itself is not modified
    route = next(r for r in registry.routes if r.method == 'Widget.prototype.updateAttributes')
    assert [a.name for a in route.accepts] == ['data']


def test_route_with_unknown_class_is_skipped(registry, caplog):
    with caplog.at_level(logging.ERROR, logger='remoting_swagger.swagger_builder'):
        docs = build_swagger_docs(registry)
    assert 'Route exists with no class' in caplog.text
    assert 'Ghost.find' in caplog.text
    nicknames = [op['nickname'] for name in docs.apis for op in _ops(docs, name)]
    assert 'Ghost_find' not in nicknames
    assert 'Ghost' not in docs.apis


def test_models_derived_from_classes(registry):
    docs = build_swagger_docs(registry)
    assert set(docs.models) == {'Widget', 'User', 'token', 'tokeninfo'}
    assert docs.models['Widget']['required'] == ['name']
    assert docs.models['Widget']['properties']['tags'] == {'type': 'array', 'required': False, 'items': {'type': 'string'}}
    assert docs.models['token']['required'] == ['access_token', 'token_type']


def test_presupplied_models_skip_derivation(registry):
    supplied = {'Custom': {'id': 'Custom', 'required': [], 'properties': {}}}
    docs = build_swagger_docs(registry, models=supplied)
    assert set(docs.models) == {'Custom', 'token', 'tokeninfo'}
    assert set(supplied) == {'Custom'}


def test_static_declarations():
    docs = build_swagger_docs(RemoteRegistry())
    oauth = docs.oauth.body
    assert [a['path'] for a in oauth['apis']] == ['/oauth/authorize', '/oauth/token', '/oauth/tokeninfo']
    token_op = oauth['apis'][1]['operations'][0]
    assert token_op['responseClass'] == 'token'
    assert token_op['parameters'][0]['name'] == 'grant_type'
    assert oauth['models'] is docs.models
    batch = docs.batch.body
    assert batch['apis'][0]['operations'][0]['parameters'][0]['paramType'] == 'body'
    assert 'models' not in batch


def test_render_resolves_base_path(registry):
    docs = build_swagger_docs(registry, SwaggerOptions(base_path='/api'))
    assert docs.resources.render()['basePath'] == '/api'
    assert docs.resources.render('http://example.com')['basePath'] == 'http://example.com/api'
    assert docs.oauth.render('http://example.com')['basePath'] == 'http://example.com'
    # rendering never mutates the built document
    assert docs.resources.body['basePath'] == '/api'


def test_absolute_base_path_is_verbatim(registry):
    docs = build_swagger_docs(registry, SwaggerOptions(base_path='https://api.example.com/v1'))
    assert docs.apis['Widget'].render('http://other.host')['basePath'] == 'https://api.example.com/v1'
