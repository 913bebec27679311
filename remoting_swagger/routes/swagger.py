from __future__ import annotations
from flask import Blueprint, g, request
from remoting_swagger.swagger_parts.documents import Document, SwaggerDocs


def _document_view(doc: Document):
    def view():
        return doc.render(g.get('swagger_origin'))
    view.__name__ = f'get_{doc.endpoint}'
    return view


def make_swagger_bp(docs: SwaggerDocs) -> Blueprint:
    """Blueprint serving every built document, mounted at ``/<docs.name>``."""
    bp = Blueprint(docs.name, __name__)

    @bp.before_request
    def capture_origin():
        # request.host comes from the Host header; kept on g so concurrent
        # requests never see each other's origin
        g.swagger_origin = f'{request.scheme}://{request.host}'

    for doc in docs.documents:
        bp.add_url_rule(doc.path, endpoint=doc.endpoint, view_func=_document_view(doc), methods=['GET'])
    return bp
