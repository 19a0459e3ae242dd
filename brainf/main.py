from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from brainf.api import compile_source
from brainf.config import InterpreterSettings, load_settings
from brainf.engine import EofPolicy
from brainf.errors import CompileError, ExecutionError
from brainf.listing import format_opcodes, format_program
from brainf.streams import stdin_source, stdout_sink

logger = logging.getLogger("brainf")

EXIT_OK = 0
EXIT_IO = 1
EXIT_COMPILE = 2
EXIT_RUNTIME = 3
EXIT_CONFIG = 4


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {value}")
    return n


def _load_sources(*, paths: list[Path], inline: str | None) -> list[tuple[str, str]] | None:
    sources: list[tuple[str, str]] = []
    if inline is not None:
        sources.append(("<eval>", inline))
    for path in paths:
        try:
            sources.append((str(path), path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("couldn't read %s: %s", path, e)
            return None
    return sources


def _run_all(*, sources: list[tuple[str, str]], settings: InterpreterSettings) -> int:
    source = stdin_source()
    sink = stdout_sink()
    for name, src in sources:
        if len(sources) > 1:
            print(f"Running {name}", file=sys.stderr, flush=True)
        try:
            program = compile_source(src=src, max_magnitude=settings.max_magnitude)
        except CompileError as e:
            logger.error("%s: %s", name, e)
            return EXIT_COMPILE
        try:
            stats = program.run(
                source=source, sink=sink, eof=settings.eof, max_cells=settings.max_cells
            )
        except ExecutionError as e:
            logger.error("%s: %s", name, e)
            return EXIT_RUNTIME
        logger.debug(
            "%s: %d steps, %d bytes in, %d bytes out, %d cells",
            name,
            stats.steps,
            stats.bytes_read,
            stats.bytes_written,
            stats.tape_size,
        )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="brainf")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="run one or more programs against stdin/stdout")
    run_p.add_argument("files", nargs="*", type=Path)
    run_p.add_argument("-e", "--eval", dest="inline", default=None, help="program text to run")
    run_p.add_argument(
        "--eof",
        choices=[p.value for p in EofPolicy],
        default=None,
        help="what ',' does once input is exhausted (default: error)",
    )
    run_p.add_argument("--max-cells", type=_positive_int, default=None, help="tape size ceiling")
    run_p.add_argument(
        "--max-magnitude", type=_positive_int, default=None, help="largest folded run allowed"
    )

    compile_p = sub.add_parser("compile", help="print the compiled opcode listing")
    compile_p.add_argument("file", nargs="?", type=Path, default=None)
    compile_p.add_argument("-e", "--eval", dest="inline", default=None, help="program text")
    compile_p.add_argument("--table", action="store_true", help="show loop partners")
    compile_p.add_argument("--compact", action="store_true", help="single-line listing")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings()
    except ValidationError as e:
        logger.error("invalid BRAINF_* settings: %s", e)
        return EXIT_CONFIG

    if args.cmd == "run":
        if not args.files and args.inline is None:
            parser.error("run needs at least one FILE or --eval")
        try:
            settings = settings.with_overrides(
                eof=args.eof, max_cells=args.max_cells, max_magnitude=args.max_magnitude
            )
        except ValidationError as e:
            logger.error("invalid options: %s", e)
            return EXIT_CONFIG
        sources = _load_sources(paths=list(args.files), inline=args.inline)
        if sources is None:
            return EXIT_IO
        return _run_all(sources=sources, settings=settings)

    if args.cmd == "compile":
        if (args.file is None) == (args.inline is None):
            parser.error("compile needs exactly one of FILE or --eval")
        sources = _load_sources(
            paths=[args.file] if args.file is not None else [], inline=args.inline
        )
        if sources is None:
            return EXIT_IO
        name, src = sources[0]
        try:
            program = compile_source(src=src, max_magnitude=settings.max_magnitude)
        except CompileError as e:
            logger.error("%s: %s", name, e)
            return EXIT_COMPILE
        if args.compact:
            print(format_opcodes(program.opcodes))
        elif program.opcodes:
            print(format_program(program, with_table=args.table))
        return EXIT_OK

    raise AssertionError(f"unhandled cmd: {args.cmd}")
