"""Validate a JSON record file (single record, list, or OData {"value": [...]}).

Usage:
  python scripts/validate_record.py <record.json> [entity] [metadata.xml]

Examples:
  python scripts/validate_record.py order.json
  python scripts/validate_record.py lines.json SalesOrderLine
  python scripts/validate_record.py customers.json customer metadata.xml

Without a metadata file (argument or BCSCHEMA_METADATA_PATH) the declared
SalesOrder, SalesOrderLine and SalesOrderWithLines schemas are used.
"""

from __future__ import annotations

import sys
from typing import Optional

from bcschema.local.files import validate_json_file
from bcschema.validate.errors import BcSchemaError


def main(argv: Optional[list[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        print(__doc__.strip(), file=sys.stderr)
        return 2
    path = argv[0]
    entity = argv[1] if len(argv) >= 2 else "SalesOrder"
    metadata = argv[2] if len(argv) >= 3 else None

    try:
        result = validate_json_file(path, entity=entity, metadata_path=metadata)
    except BcSchemaError as exc:
        print({"path": path, "entity": entity, "error": str(exc)}, file=sys.stderr)
        return 1
    print(result)
    return 0 if not result["issues"] else 1


if __name__ == "__main__":
    sys.exit(main())
