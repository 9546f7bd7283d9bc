from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import shlex
import sys
from typing import List, Optional

from rich.console import Console

from argschema import config
from argschema.infer import SchemaUpdater
from argschema.provider import CommandProvider
from argschema.schema import Schema
from argschema.signature import Language, ParseError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argschema",
        description="Infer (or refresh) the argument schema of a script's entry point.",
    )
    parser.add_argument("language", help=", ".join(lang.value for lang in Language))
    parser.add_argument("source", help="script to analyze, or - for stdin")
    parser.add_argument("--schema", help="existing schema (JSON) to update")
    parser.add_argument("--parser", help="analyzer command; defaults to $ARGSCHEMA_PARSER")
    parser.add_argument(
        "--write", action="store_true", help="write the result back to --schema"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)
    console = Console()
    err_console = Console(stderr=True)

    if args.write and not args.schema:
        err_console.print("[red]--write requires --schema[/red]")
        return 2

    command = shlex.split(args.parser) if args.parser else config.PARSER_COMMAND
    if len(command) == 0:
        err_console.print("[red]no analyzer: pass --parser or set ARGSCHEMA_PARSER[/red]")
        return 2

    if not Language.supports(args.language):
        err_console.print(
            f"[yellow]unsupported language {args.language}; schema unchanged[/yellow]"
        )

    code = _read_source(args.source)
    schema = _load_schema(args.schema)

    updater = SchemaUpdater(CommandProvider(command))
    try:
        asyncio.run(updater.update(args.language, code, schema))
    except ParseError as e:
        err_console.print(f"[red]invalid {args.language} source:[/red] {e}")
        return 1

    if args.write:
        with open(args.schema, "w") as file:
            json.dump(schema.to_json(), file, indent=2)
            file.write("\n")
    else:
        console.print_json(data=schema.to_json())
    return 0


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r") as file:
        return file.read()


def _load_schema(path: Optional[str]) -> Schema:
    if not path or not os.path.exists(path):
        return Schema()
    with open(path, "r") as file:
        return Schema.from_json(json.load(file))
