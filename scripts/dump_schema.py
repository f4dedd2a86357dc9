#!/usr/bin/env python
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from graphql import print_schema

from gqlsdl.ast import dump_node
from gqlsdl.diagnostics import SchemaError
from gqlsdl.parser import parse_schema
from gqlsdl.pipeline import build_schema


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compile an SDL file and print the result.")
    parser.add_argument("path", type=Path, help="Schema source file.")
    parser.add_argument("--ast", action="store_true", help="Print the parsed AST as JSON instead of the schema.")
    parser.add_argument("--verbose", action="store_true", help="Log compile steps to stderr.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    text = args.path.read_text(encoding="utf-8")
    try:
        if args.ast:
            print(json.dumps(dump_node(parse_schema(text)), indent=2))
        else:
            # Without implementations every enum is name-backed and no field is bound.
            print(print_schema(build_schema(text)))
    except SchemaError as exc:
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
