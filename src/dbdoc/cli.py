"""Write the schema definition workbook to a file.

Usage:
    dbdoc-export --output docs/DB_Schema.xlsx
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dbdoc.config import InvalidConfiguration, Settings
from dbdoc.service import generate_excel


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export database table definitions to Excel")
    p.add_argument("--output", default="DB_Schema.xlsx", help="Workbook to write (default: DB_Schema.xlsx)")
    p.add_argument("--env-file", help="Read DBDOC_* settings from this .env file")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        settings = Settings.from_env(args.env_file)
        logging.basicConfig(level=settings.log_level)
        data = generate_excel(settings)
    except InvalidConfiguration as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    print(f"Saved: {output}")


if __name__ == "__main__":
    main()
