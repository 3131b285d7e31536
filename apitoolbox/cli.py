"""CLI entry point: run one tool action and print the envelope as JSON."""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, Iterable, List, Optional, Set

from .constants import BUILTIN_TOOL_NAMES


def _parse_value(raw: str) -> Any:
    """JSON literals (numbers, booleans, quoted strings) or the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def string_param_names(schema: Dict[str, Any]) -> Set[str]:
    """Properties of a tool parameter schema whose only non-null type is string."""
    names = set()
    for name, prop in schema.get("properties", {}).items():
        variants = prop.get("anyOf", [prop])
        types = {variant.get("type") for variant in variants} - {"null"}
        if types == {"string"}:
            names.add(name)
    return names


def build_arguments(
    action: str,
    params: List[str],
    json_args: Optional[str],
    string_keys: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Merge ``--json`` and ``--param key=value`` into tool arguments.

    Values for *string_keys* are kept verbatim; other values are parsed as JSON
    when possible.
    """
    string_keys = set(string_keys)
    arguments: Dict[str, Any] = {}
    if json_args:
        loaded = json.loads(json_args)
        if not isinstance(loaded, dict):
            raise ValueError("--json must be a JSON object")
        arguments.update(loaded)

    for item in params:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid --param {item!r}, expected key=value")
        arguments[key] = value if key in string_keys else _parse_value(value)

    arguments["action"] = action
    return arguments


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Invoke an API tool once")
    parser.add_argument("tool", choices=BUILTIN_TOOL_NAMES, help="Tool to invoke")
    parser.add_argument("action", help="Tool action, e.g. listIssues")
    parser.add_argument(
        "--param", "-p", action="append", default=[], metavar="KEY=VALUE",
        help="Tool argument (repeatable); string parameters are taken verbatim, others parsed as JSON when possible",
    )
    parser.add_argument("--json", dest="json_args", help="Tool arguments as a JSON object")
    parser.add_argument("--config", default=os.getenv("APITOOLBOX_CONFIG"), help="YAML config file")
    parser.add_argument("--call-id", default="cli", help="Call ID used in logs")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(name)s - %(message)s",
        stream=sys.stderr,
    )

    from .builtin_tools import BUILTIN_TOOL_CLASSES

    params_model = BUILTIN_TOOL_CLASSES[args.tool].params_model
    string_keys = string_param_names(params_model.model_json_schema(by_alias=True))
    try:
        arguments = build_arguments(args.action, args.param, args.json_args, string_keys)
    except (ValueError, json.JSONDecodeError) as e:
        parser.error(str(e))

    from .app import ApiToolbox

    toolbox = ApiToolbox(args.config)
    envelope = asyncio.run(toolbox.call(args.tool, arguments, call_id=args.call_id))

    print(json.dumps(envelope.to_dict(), indent=2, ensure_ascii=False))
    return 1 if envelope.is_error() else 0


if __name__ == "__main__":
    sys.exit(main())
