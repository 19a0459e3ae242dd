from __future__ import annotations

from collections.abc import Sequence

from brainf.opcodes import Opcode, OpKind
from brainf.program import Program


def format_opcodes(opcodes: Sequence[Opcode]) -> str:
    """One-line form, e.g. ``+2 [ - ] [ ]``."""
    return " ".join(str(op) for op in opcodes)


def format_program(program: Program, *, with_table: bool = True) -> str:
    width = len(str(max(len(program) - 1, 0)))
    lines = []
    for i, op in enumerate(program.opcodes):
        lines.append(f"{i:>{width}}  {_op(op)}")
        if with_table and op.kind in (OpKind.BEGIN_LOOP, OpKind.END_LOOP):
            lines[-1] += f" -> {program.table[i]}"
    return "\n".join(lines)


def _op(op: Opcode) -> str:
    if op.kind.counted:
        return f"{op.kind.value} {op.count}"
    return op.kind.value
