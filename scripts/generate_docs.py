#!/usr/bin/env python
"""Generate Swagger documents from a registry snapshot without starting a server.

Usage:
  python -m scripts.generate_docs --registry registry.json --out build/swagger
  python -m scripts.generate_docs --registry registry.json --hash
  python -m scripts.generate_docs --registry registry.json --name api --api-version 1.0

Options:
  --registry PATH     Registry snapshot JSON (classes + routes), required
  --out DIR           Write one JSON file per document into DIR (auto-created)
  --name NAME         Endpoint prefix (default: swagger)
  --api-version VER   apiVersion advertised by every document
  --base-path PATH    Configured basePath (absolute URLs are kept verbatim)
  --hash              Print a SHA-256 over all documents (deterministic)

Safe Defaults:
  Without --out, prints the resource listing to stdout.

Exit Codes:
  0 success
  3 invalid registry or options
"""
from __future__ import annotations
import argparse, json, hashlib, pathlib, sys

from remoting_swagger.config.swagger import normalize_swagger_options
from remoting_swagger.registry import RemoteRegistry
from remoting_swagger.swagger import build_swagger_docs


def render_all(docs) -> dict:
    # keyed by operation id, rendered without a request origin
    return {doc.operation_id: doc.render() for doc in docs.documents}


def compute_hash(rendered: dict) -> str:
    blob = json.dumps(rendered, sort_keys=True, separators=(',', ':')).encode()
    return hashlib.sha256(blob).hexdigest()


def main(argv: list[str]) -> int:
    p = argparse.ArgumentParser(description="Generate Swagger 1.2 documents from a registry snapshot")
    p.add_argument('--registry', required=True, help='Path to the registry snapshot JSON')
    p.add_argument('--out', dest='out', help='Directory to write one JSON file per document')
    p.add_argument('--name', default=None, help='Endpoint prefix (default: swagger)')
    p.add_argument('--api-version', dest='api_version', default=None, help='apiVersion for every document')
    p.add_argument('--base-path', dest='base_path', default='', help='Configured basePath')
    p.add_argument('--hash', action='store_true', help='Print a SHA-256 over all documents')
    args = p.parse_args(argv)

    try:
        registry = RemoteRegistry.from_file(args.registry)
        options = normalize_swagger_options(args.name, args.api_version, args.base_path)
    except (OSError, ValueError) as exc:
        # RegistryError is a ValueError
        print(f"Cannot build documents: {exc}", file=sys.stderr)
        return 3

    docs = build_swagger_docs(registry, options)
    rendered = render_all(docs)

    if args.out:
        out_dir = pathlib.Path(args.out)
        out_dir.mkdir(parents=True, exist_ok=True)
        for operation_id, body in rendered.items():
            out_path = out_dir / f"{operation_id}.json"
            out_path.write_text(json.dumps(body, indent=2) + '\n')
        print(f"Wrote {len(rendered)} documents to {out_dir}")

    if args.hash:
        print(compute_hash(rendered))

    if not args.out and not args.hash:
        print(json.dumps(rendered[docs.resources.operation_id], indent=2))

    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
