from __future__ import annotations

from brainf.api import brainf, compile_source, run_source
from brainf.compiler import compile_opcodes, strip_comments
from brainf.config import InterpreterSettings, load_settings
from brainf.engine import ByteSink, ByteSource, EofPolicy, ExecutionEngine, RunStats, Tape
from brainf.errors import (
    BrainfError,
    CompileError,
    ExecutionError,
    InputExhausted,
    MagnitudeOverflow,
    SinkFailure,
    StructuralError,
    TapeLimitExceeded,
    UnmatchedClose,
    UnmatchedOpen,
)
from brainf.jump_table import build_jump_table
from brainf.opcodes import Opcode, OpKind
from brainf.program import Program

__all__ = [
    "__version__",
    # Pipeline
    "compile_opcodes",
    "strip_comments",
    "build_jump_table",
    "ExecutionEngine",
    "Tape",
    "RunStats",
    "EofPolicy",
    "ByteSource",
    "ByteSink",
    # Data
    "Opcode",
    "OpKind",
    "Program",
    # Convenience
    "brainf",
    "compile_source",
    "run_source",
    # Settings
    "InterpreterSettings",
    "load_settings",
    # Errors
    "BrainfError",
    "CompileError",
    "StructuralError",
    "UnmatchedClose",
    "UnmatchedOpen",
    "MagnitudeOverflow",
    "ExecutionError",
    "InputExhausted",
    "SinkFailure",
    "TapeLimitExceeded",
]

__version__ = "0.1.0"
