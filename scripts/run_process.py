#!/usr/bin/env python3
"""
Process description runner

Usage:
  python scripts/run_process.py --source <path-or-name> [--start <step>] [--mode chain|process]
  python scripts/run_process.py --process-id <id> [--set key=value ...] [--command name=module:Class ...]
  python scripts/run_process.py --source <path-or-name> --log-format json

Examples:
  python scripts/run_process.py --source processes/order.xml --start Start
  python scripts/run_process.py --process-id order --mode chain --set resultString=
  python scripts/run_process.py --source order.yaml --command validate=myapp.commands:Validate

Command references in the description that are not registered with --command
are imported as "package.module:Name".
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

from application.builder.process_builder import ProcessBuilder
from application.executor.command_registry import CommandRegistry
from domain.context import Context
from domain.errors import DescriptionLoadError, ProcessError
from domain.outcome import Outcome
from infrastructure.config.settings import EngineSettings
from infrastructure.description.file_finder import DescriptionFileFinder
from infrastructure.description.file_source import FileDescriptionSource
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger


def _parse_pairs(items: Optional[List[str]], label: str) -> Dict[str, str]:
    pairs: Dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid {label} (expected key=value): {item}")
        pairs[key.strip()] = value
    return pairs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a command chain or process from its description")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--source", type=str, help="description file or resource name")
    source.add_argument("--process-id", type=str, help="look the description up by process id")
    parser.add_argument("--start", type=str, help="start step (defaults to the declared start)")
    parser.add_argument("--mode", type=str, choices=["chain", "process"])
    parser.add_argument("--set", dest="values", action="append", metavar="KEY=VALUE")
    parser.add_argument("--command", dest="commands", action="append", metavar="NAME=MODULE:CLASS")
    parser.add_argument("--log-level", type=str)
    parser.add_argument("--log-format", type=str, choices=["loguru", "json"], default="loguru")
    return parser


def _resolve_source(args: argparse.Namespace, finder: DescriptionFileFinder) -> str:
    if args.source:
        return args.source
    path = finder.find_by_id(args.process_id)
    if path is None:
        raise ValueError(f"Process description not found: {args.process_id}")
    return str(path)


def _run(args: argparse.Namespace, settings: EngineSettings) -> int:
    finder = DescriptionFileFinder(settings.description_paths)
    source = _resolve_source(args, finder)

    registry = CommandRegistry(allow_import=True)
    for name, target in _parse_pairs(args.commands, "command").items():
        registry.register(name, CommandRegistry.import_factory(target))

    builder = ProcessBuilder(
        source,
        registry,
        description_source=FileDescriptionSource(finder=finder),
        logger=ConsoleLogger() if args.log_format == "json" else LoguruLogger(),
        max_steps=settings.max_steps,
    )
    context = Context(_parse_pairs(args.values, "value"))

    mode = args.mode
    start = args.start
    if mode != "chain":
        try:
            graph = builder.build(strict=mode == "process")
        except DescriptionLoadError as e:
            raise ValueError(f"Failed to load process description: {e}") from e
        start = start or graph.start_step_id
        if mode is None:
            mode = "process" if start else "chain"
        elif start is None:
            raise ValueError("--start is required: the description declares no start step")

    if mode == "chain":
        outcome = builder.execute_command(context)
        print(f"Outcome: {outcome.value}")
        exit_code = 0 if outcome is Outcome.SUCCESS else 1
    else:
        builder.execute_as_process(start, context)
        print("Process finished")
        exit_code = 0

    print(f"Process: {builder.process_id or '-'} ({source})")
    print(f"Mode: {mode}")
    print(f"Context: {json.dumps(context.snapshot(), indent=2, ensure_ascii=False, default=str)}")
    return exit_code


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = EngineSettings.from_env()
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    try:
        setup_console_logging(level=args.log_level or settings.log_level)
        code = _run(args, settings)
    except (ValueError, ProcessError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
