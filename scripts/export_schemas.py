"""Export JSON Schema (draft 2020-12) for every entity in a metadata file.

Usage:
  python scripts/export_schemas.py <metadata.xml> [out.json]

Without an output path the document is written to stdout.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

from bcschema.local.files import export_json_schemas
from bcschema.validate.errors import BcSchemaError


def main(argv: Optional[list[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print(__doc__.strip(), file=sys.stderr)
        return 2
    metadata = argv[0]
    out = argv[1] if len(argv) >= 2 else None

    try:
        result = export_json_schemas(metadata, out)
    except BcSchemaError as exc:
        print({"metadata": metadata, "error": str(exc)}, file=sys.stderr)
        return 1
    if out is None:
        print(json.dumps(result["document"], indent=2))
    else:
        print({"metadata": metadata, "out": out, "schemas": len(result["schemas"])})
    return 0


if __name__ == "__main__":
    sys.exit(main())
