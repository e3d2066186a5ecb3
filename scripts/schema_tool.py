#!/usr/bin/env python3
"""Command-line access to schema inference, examples, code generation and validation.

Examples:
    schema_tool.py infer --input sample.json --required > schema.json
    schema_tool.py example --schema schema.json
    schema_tool.py codegen --input sample.json --with-example
    schema_tool.py validate --schema schema.json --input request.json --extract
    schema_tool.py paths --schema schema.json

Exit codes: 0 success, 1 input rejected by the schema, 2 unusable arguments or files.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from jsonshape.application.code_generation import GenerateOptions, generate_schema_code
from jsonshape.application.example_data import to_json_example
from jsonshape.application.inference import infer_schema
from jsonshape.application.schema_walker import schema_paths
from jsonshape.config import Settings, load_settings
from jsonshape.domain.errors import JsonShapeError, SettingsError, ValidationError
from jsonshape.domain.reason_codes import REASON_CODE_HINTS
from jsonshape.engine.unknown_nodes import ExtensionEnvelopePolicy, default_envelopes
from jsonshape.engine.validator import Validator
from jsonshape.infrastructure.json_codec import parse_json, stringify_json
from jsonshape.infrastructure.schema_codec import dump_schema, load_schema

logger = logging.getLogger("jsonshape.schema_tool")


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _cmd_infer(args: argparse.Namespace, settings: Settings) -> int:
    policy = "REQUIRED" if args.required else settings.inference_default
    node = infer_schema(parse_json(_read_text(args.input)), policy)
    print(dump_schema(node, compact=False))
    return 0


def _cmd_example(args: argparse.Namespace, settings: Settings) -> int:
    print(to_json_example(load_schema(_read_text(args.schema))))
    return 0


def _cmd_codegen(args: argparse.Namespace, settings: Settings) -> int:
    options = GenerateOptions(
        generate_example=args.with_example,
        generate_description=args.with_description,
        force_required=args.force_required,
    )
    document = parse_json(_read_text(args.input))
    print(generate_schema_code(document, options, policy=settings.inference_default))
    return 0


def _cmd_validate(args: argparse.Namespace, settings: Settings) -> int:
    validator = Validator.from_schema(load_schema(_read_text(args.schema)))
    if args.keep_extensions:
        validator.set_unknown_node_filter(ExtensionEnvelopePolicy(default_envelopes(settings.remark_max_length)))
    document = parse_json(_read_text(args.input))
    try:
        if args.extract:
            print(stringify_json(validator.extract(document), compact=False))
        else:
            validator.validate(document)
            print("OK")
    except ValidationError as exc:
        print(f"FAIL: {exc.reason_code} at `{exc.path}`")
        print(f"  - {exc.message}")
        hint = REASON_CODE_HINTS.get(exc.reason_code)
        if hint:
            print(f"  hint: {hint}")
        return 1
    return 0


def _cmd_paths(args: argparse.Namespace, settings: Settings) -> int:
    for path in schema_paths(load_schema(_read_text(args.schema))):
        print(path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Infer, inspect and apply JSON shape schemas")
    commands = parser.add_subparsers(dest="command", required=True)

    infer = commands.add_parser("infer", help="Infer a schema definition from a sample document")
    infer.add_argument("--input", type=Path, required=True)
    infer.add_argument("--required", action="store_true", help="Mark every inferred field as required")
    infer.set_defaults(handler=_cmd_infer)

    example = commands.add_parser("example", help="Render the example document of a schema")
    example.add_argument("--schema", type=Path, required=True)
    example.set_defaults(handler=_cmd_example)

    codegen = commands.add_parser("codegen", help="Generate Python source for a sample document")
    codegen.add_argument("--input", type=Path, required=True)
    codegen.add_argument("--with-example", action="store_true")
    codegen.add_argument("--with-description", action="store_true")
    codegen.add_argument("--force-required", action="store_true")
    codegen.set_defaults(handler=_cmd_codegen)

    validate = commands.add_parser("validate", help="Validate a document against a schema")
    validate.add_argument("--schema", type=Path, required=True)
    validate.add_argument("--input", type=Path, required=True)
    validate.add_argument("--extract", action="store_true", help="Print the extracted document")
    validate.add_argument(
        "--keep-extensions", action="store_true", help="Keep `remark` and `extendProps` extension fields"
    )
    validate.set_defaults(handler=_cmd_validate)

    paths = commands.add_parser("paths", help="List the dotted path of every named schema node")
    paths.add_argument("--schema", type=Path, required=True)
    paths.set_defaults(handler=_cmd_paths)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except SettingsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(level=settings.numeric_log_level, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.handler(args, settings)
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except JsonShapeError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
