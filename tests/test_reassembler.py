import pytest

from minnowtcp.byte_stream import ByteStream
from minnowtcp.reassembler import Reassembler


def make(capacity=64):
    return Reassembler(ByteStream(capacity))


# Each case: capacity, then steps of (inserts, expected output, pending, closed).
CASES = {
    "in_order": (64, [([(0, b"abc", False)], b"abc", 0, False)]),
    "out_of_order": (
        64,
        [
            ([(3, b"def", False)], b"", 3, False),
            ([(0, b"abc", False)], b"abcdef", 0, False),
        ],
    ),
    "overlapping_counted_once": (
        64,
        [
            ([(1, b"bc", False), (2, b"cd", False)], b"", 3, False),
            ([(0, b"a", False)], b"abcd", 0, False),
        ],
    ),
    "duplicate_written_once": (64, [([(0, b"ab", False), (0, b"ab", False)], b"ab", 0, False)]),
    "last_substring_closes": (64, [([(0, b"hello", True)], b"hello", 0, True)]),
    "empty_last_substring": (64, [([(0, b"", True)], b"", 0, True)]),
    "last_substring_first": (
        64,
        [
            ([(2, b"cd", True)], b"", 2, False),
            ([(0, b"ab", False)], b"abcd", 0, True),
        ],
    ),
    "beyond_capacity": (4, [([(0, b"abcdef", False)], b"abcd", 0, False)]),
    "past_window": (4, [([(4, b"x", False)], b"", 0, False)]),
    "truncated_last": (2, [([(0, b"abc", True)], b"ab", 0, False)]),
    "insert_after_close": (64, [([(0, b"ab", True), (2, b"zz", False)], b"ab", 0, True)]),
    "stale_segment": (64, [([(0, b"abcd", False), (1, b"b", False)], b"abcd", 0, False)]),
}


@pytest.mark.parametrize("capacity,steps", list(CASES.values()), ids=list(CASES))
def test_reassembly(capacity, steps):
    r = make(capacity)
    for inserts, output, pending, closed in steps:
        for first_index, data, last in inserts:
            r.insert(first_index, data, last)
        assert r.reader().peek() == output
        assert r.reader().bytes_buffered() == len(output)
        assert r.writer().bytes_pushed() == len(output)
        assert r.bytes_pending() == pending
        assert r.writer().is_closed() is closed


def test_stream_finishes_after_last_substring_popped():
    r = make()
    r.insert(0, b"hello", True)
    assert not r.reader().is_finished()
    r.reader().pop(5)
    assert r.reader().is_finished()


def test_window_advances_after_reader_pops():
    r = make(4)
    data = b"abcdef"
    r.insert(0, data, False)
    r.reader().pop(4)
    r.insert(4, data[4:], True)
    assert r.reader().peek() == data[4:]
    assert r.writer().is_closed()