#!/usr/bin/env python
"""Export Strawberry GraphQL schema SDL.

Default output: backend/graphql_api/schema.graphql
Override path: --out <path>

Assumes `app.py` exposes either `schema` (strawberry.Schema) or `app.schema`.

Exit codes:
    0 success
    1 import failure
    2 schema attribute not found
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import List, Optional

HEADER = '''"""
Canonical GraphQL SDL of the health metrics backend.
Generated by backend/scripts/export_schema.py, do not edit by hand.
"""'''

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_OUT = BASE_DIR / "graphql_api" / "schema.graphql"


def render_sdl(schema: object) -> str:
    """Return the SDL of ``schema`` with the canonical header prepended."""
    from strawberry.printer import print_schema

    return f"{HEADER}\n{print_schema(schema).strip()}\n"  # type: ignore[arg-type]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export GraphQL SDL")
    parser.add_argument("--out", dest="out", default=str(DEFAULT_OUT))
    args = parser.parse_args(argv)

    # Ensure backend root is on sys.path for 'import app'
    if str(BASE_DIR) not in sys.path:
        sys.path.insert(0, str(BASE_DIR))

    try:
        mod = importlib.import_module("app")
    except ModuleNotFoundError as e:
        print(f"[ERROR] Cannot import app module: {e}", file=sys.stderr)
        return 1

    schema = getattr(mod, "schema", None)
    if schema is None:
        schema = getattr(getattr(mod, "app", None), "schema", None)
    if schema is None:
        print("[ERROR] Schema not found (need 'schema' or 'app.schema').", file=sys.stderr)
        return 2

    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_sdl(schema), encoding="utf-8")
    print(f"[INFO] schema SDL written to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
