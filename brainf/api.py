from __future__ import annotations

from brainf.compiler import compile_opcodes
from brainf.config import InterpreterSettings, load_settings
from brainf.engine import ByteSink, ByteSource, EofPolicy, RunStats
from brainf.jump_table import build_jump_table
from brainf.program import Program
from brainf.streams import BufferSink, BytesSource, stdin_source, stdout_sink


def compile_source(*, src: str, max_magnitude: int | None = None) -> Program:
    opcodes = compile_opcodes(src, max_magnitude=max_magnitude)
    table = build_jump_table(opcodes)
    return Program(opcodes=tuple(opcodes), table=tuple(table))


def run_source(
    *,
    src: str,
    stdin: bytes = b"",
    eof: EofPolicy = EofPolicy.ERROR,
    max_cells: int | None = None,
    max_magnitude: int | None = None,
) -> bytes:
    program = compile_source(src=src, max_magnitude=max_magnitude)
    sink = BufferSink()
    program.run(source=BytesSource(stdin), sink=sink, eof=eof, max_cells=max_cells)
    return sink.getvalue()


def brainf(
    src: str,
    *,
    source: ByteSource | None = None,
    sink: ByteSink | None = None,
    settings: InterpreterSettings | None = None,
) -> RunStats:
    """Compile and run ``src``, defaulting to the process's stdin and stdout."""
    if settings is None:
        settings = load_settings()
    program = compile_source(src=src, max_magnitude=settings.max_magnitude)
    return program.run(
        source=source if source is not None else stdin_source(),
        sink=sink if sink is not None else stdout_sink(),
        eof=settings.eof,
        max_cells=settings.max_cells,
    )
