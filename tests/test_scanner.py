import io
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from linecalc.scanner import Scanner  # noqa: E402


def drain(scanner: Scanner) -> str:
    chars = []
    while not scanner.at_end():
        chars.append(scanner.peek())
        scanner.advance()
    return "".join(chars)


def test_lookahead_is_loaded_on_construction():
    s = Scanner("ab")
    assert s.peek() == "a"
    assert not s.at_end()
    assert s.position == 0


def test_advance_walks_to_end_marker():
    s = Scanner("ab")
    s.advance()
    assert s.peek() == "b"
    s.advance()
    assert s.at_end()
    assert s.peek() == ""
    assert s.position == 2
    # Advancing past the end is a no-op.
    s.advance()
    assert s.at_end()
    assert s.position == 2


def test_empty_source_is_immediately_at_end():
    s = Scanner("")
    assert s.at_end()
    assert s.peek() == ""


def test_skip_blanks_stops_at_newline():
    s = Scanner(" \t \nx")
    s.skip_blanks()
    assert s.peek() == "\n"


def test_discard_line_leaves_newline_in_lookahead():
    s = Scanner("1 + oops\n2")
    s.discard_line()
    assert s.peek() == "\n"
    s.advance()
    assert s.peek() == "2"


def test_discard_line_without_newline_reaches_end():
    s = Scanner("garbage")
    s.discard_line()
    assert s.at_end()


def test_reads_from_text_stream_one_char_at_a_time():
    stream = io.StringIO("12\n34\n")
    first = Scanner(stream)
    assert first.peek() == "1"
    first.discard_line()
    # A second scanner on the same stream resumes after the newline.
    second = Scanner(stream)
    assert drain(second) == "34\n"
