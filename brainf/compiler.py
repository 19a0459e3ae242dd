from __future__ import annotations

import logging
import re

from brainf.errors import MagnitudeOverflow
from brainf.opcodes import COMMANDS, Opcode, OpKind

logger = logging.getLogger(__name__)

# Arithmetic and shift runs fold; the four others are always single opcodes.
_TOKEN_RE = re.compile(r"[-+]+|[<>]+|[.,\[\]]")

_SINGLETONS = {ch: Opcode(OpKind.from_char(ch)) for ch in ".,[]"}


def strip_comments(src: str) -> str:
    """Drop every character that is not one of the eight commands."""
    return "".join(ch for ch in src if ch in COMMANDS)


def _fold(run: str) -> Opcode | None:
    if OpKind.from_char(run[0]) in (OpKind.ADD, OpKind.SUB):
        up, down = OpKind.ADD, OpKind.SUB
    else:
        up, down = OpKind.RIGHT, OpKind.LEFT
    net = run.count(up.symbol) - run.count(down.symbol)
    if net == 0:
        return None
    return Opcode(up, net) if net > 0 else Opcode(down, -net)


def compile_opcodes(src: str, *, max_magnitude: int | None = None) -> list[Opcode]:
    """Compile source text into a run-length folded opcode list.

    Never fails on bracket nesting; that is checked by ``build_jump_table``.
    With ``max_magnitude`` set, a folded run larger than the limit raises
    ``MagnitudeOverflow``.
    """
    opcodes: list[Opcode] = []
    for m in _TOKEN_RE.finditer(strip_comments(src)):
        text = m.group(0)
        single = _SINGLETONS.get(text)
        if single is not None:
            opcodes.append(single)
            continue
        op = _fold(text)
        if op is None:
            continue
        if max_magnitude is not None and op.count > max_magnitude:
            raise MagnitudeOverflow(op.count, limit=max_magnitude, index=len(opcodes))
        opcodes.append(op)
    logger.debug("compiled %d chars into %d opcodes", len(src), len(opcodes))
    return opcodes
