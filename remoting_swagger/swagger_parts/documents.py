"""Built Swagger documents and their per-request rendering.

Documents are built once at start-up and never mutated. The ``basePath`` a
client sees depends on the host it used, so it is computed in `render` from
the request origin instead of being stored on the document.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .helpers import resolve_base_path


@dataclass(frozen=True)
class Document:
    operation_id: str  # e.g. "swagger.resources"
    endpoint: str  # Flask endpoint name inside the swagger blueprint
    path: str  # serving path relative to the blueprint prefix
    body: Mapping[str, Any]
    base_path: str = ""

    def render(self, origin: Optional[str] = None) -> Dict[str, Any]:
        rendered = dict(self.body)
        rendered["basePath"] = resolve_base_path(self.base_path, origin)
        return rendered


@dataclass(frozen=True)
class SwaggerDocs:
    name: str
    resources: Document
    oauth: Document
    batch: Document
    apis: Mapping[str, Document]  # class name -> API declaration
    models: Mapping[str, Any]

    @property
    def documents(self) -> List[Document]:
        return [self.resources, self.oauth, self.batch, *self.apis.values()]

    def get(self, operation_id: str) -> Optional[Document]:
        for doc in self.documents:
            if doc.operation_id == operation_id:
                return doc
        return None


__all__ = ["Document", "SwaggerDocs"]
