from __future__ import annotations

from collections.abc import Sequence

from brainf.errors import UnmatchedClose, UnmatchedOpen
from brainf.opcodes import Opcode, OpKind


def build_jump_table(opcodes: Sequence[Opcode]) -> list[int]:
    """Map every loop bracket's index to its partner's index.

    Entries for non-bracket opcodes are 0 and mean nothing.
    """
    table = [0] * len(opcodes)
    stack: list[int] = []

    for i, op in enumerate(opcodes):
        if op.kind == OpKind.BEGIN_LOOP:
            stack.append(i)
        elif op.kind == OpKind.END_LOOP:
            if not stack:
                raise UnmatchedClose(i)
            start = stack.pop()
            table[start] = i
            table[i] = start

    if stack:
        raise UnmatchedOpen(len(stack))
    return table
