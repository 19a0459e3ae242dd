from __future__ import annotations

import pytest

from brainf.compiler import compile_opcodes
from brainf.engine import EofPolicy, ExecutionEngine, Tape
from brainf.errors import InputExhausted, SinkFailure, TapeLimitExceeded
from brainf.jump_table import build_jump_table
from brainf.opcodes import left
from brainf.streams import BufferSink, BytesSource


def _engine(src: str, *, stdin: bytes = b"", **kw) -> tuple[ExecutionEngine, BufferSink]:
    ops = compile_opcodes(src)
    sink = BufferSink()
    engine = ExecutionEngine(
        ops, build_jump_table(ops), source=BytesSource(stdin), sink=sink, **kw
    )
    return engine, sink


def test_prints_hello_world(hello_world: str):
    engine, sink = _engine(hello_world)
    stats = engine.run()
    assert sink.getvalue() == b"Hello, World!"
    assert stats.bytes_written == 13
    assert stats.bytes_read == 0


def test_skips_loop_at_beginning():
    engine, sink = _engine("[+.]")
    stats = engine.run()
    assert sink.getvalue() == b""
    assert stats.steps == 1


def test_halting_loops():
    for src in ("++[-]", "--[+]", ">++[-<->]<[+]"):
        engine, sink = _engine(src)
        engine.run()
        assert sink.getvalue() == b""


def test_cells_wrap_modulo_256():
    engine, sink = _engine("-." + "+" * 257 + ".")
    engine.run()
    assert sink.getvalue() == bytes([255, 0])


def test_print_is_raw_bytes():
    # 0xFF and 0x80 are not valid UTF-8 on their own.
    engine, sink = _engine("-.>" + "+" * 128 + ".")
    engine.run()
    assert sink.getvalue() == b"\xff\x80"


def test_input_echo():
    engine, sink = _engine(",[.,]", stdin=b"abc", eof=EofPolicy.ZERO)
    stats = engine.run()
    assert sink.getvalue() == b"abc"
    assert stats.bytes_read == 3


def test_input_exhausted_raises_by_default():
    engine, _ = _engine(",.,.", stdin=b"x")
    with pytest.raises(InputExhausted) as exc:
        engine.run()
    assert exc.value.pc == 2


def test_eof_policies():
    engine, sink = _engine("+++,.", eof=EofPolicy.ZERO)
    engine.run()
    assert sink.getvalue() == b"\x00"

    engine, sink = _engine("+++,.", eof=EofPolicy.UNCHANGED)
    engine.run()
    assert sink.getvalue() == b"\x03"


class _BrokenSink:
    def write_byte(self, value: int) -> None:
        raise BrokenPipeError("pipe closed")


def test_sink_failure_is_wrapped():
    ops = compile_opcodes("+.")
    engine = ExecutionEngine(
        ops, build_jump_table(ops), source=BytesSource(), sink=_BrokenSink()
    )
    with pytest.raises(SinkFailure) as exc:
        engine.run()
    assert isinstance(exc.value.__cause__, BrokenPipeError)
    assert exc.value.pc == 1


def test_left_shift_past_start_grows_tape():
    tape = Tape()
    tape.current = 7
    tape.shift_left(3)
    assert tape.position == 0
    assert len(tape) == 4
    assert tape.cells() == b"\x00\x00\x00\x07"

    tape.shift_right(3)
    assert tape.current == 7
    tape.shift_left(1)
    assert tape.position == 2


def test_right_shift_grows_tape():
    tape = Tape()
    tape.shift_right(5)
    assert tape.position == 5
    assert len(tape) == 6
    tape.shift_left(2)
    tape.shift_right(1)
    assert len(tape) == 6


def test_left_shift_in_program():
    # Cell written before the shift keeps its value after the tape grows.
    engine, sink = _engine("+++<<<<<+>>>>>.")
    stats = engine.run()
    assert sink.getvalue() == b"\x03"
    assert stats.tape_size == 6


def test_tape_limit():
    engine, _ = _engine(">>>>", max_cells=4)
    with pytest.raises(TapeLimitExceeded) as exc:
        engine.run()
    assert exc.value.size == 5

    engine, _ = _engine(">>>+<<<<", max_cells=4)
    with pytest.raises(TapeLimitExceeded):
        engine.run()

    engine, _ = _engine(">>>", max_cells=4)
    assert engine.run().tape_size == 4


def test_table_length_must_match():
    with pytest.raises(ValueError):
        ExecutionEngine([left(1)], [], source=BytesSource(), sink=BufferSink())


def test_run_starts_fresh_each_time():
    engine, sink = _engine("+++.")
    engine.run()
    engine.run()
    assert sink.getvalue() == b"\x03\x03"
