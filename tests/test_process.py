import os

import pytest

from pagesim.process import Process

LINES = [b"0041f7a0 R", b"13f8e7c8 W", b"0041f7a0 R", b"00001000 W"]


@pytest.fixture
def trace(tmp_path):
    path = tmp_path / "sample.trace"
    path.write_bytes(b"".join(line + b"\n" for line in LINES))
    return path


def read_all(process):
    ops = []
    while process.read_line():
        ops.append((process.line, process.current_instruction.operation))
    return ops


def test_reads_every_line_in_order(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        result = read_all(process)
    assert [line for line, _ in result] == [line.decode() for line in LINES]
    assert [op for _, op in result] == ["R", "W", "R", "W"]


def test_estimate_from_file_size(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        assert process.estimated_instructions == 4


def test_estimate_before_open_is_zero(trace):
    with Process(trace, 0, 11) as process:
        assert process.estimated_instructions == 0


def test_remaining_decreases_per_read(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        before = process.remaining_instructions
        assert process.read_line()
        assert process.remaining_instructions == before - 1


def test_current_instruction_before_read(trace):
    with Process(trace, 0, 11) as process:
        with pytest.raises(RuntimeError):
            _ = process.current_instruction
        assert process.read_line() is True
        assert process.current_instruction.operation == "R"


def test_end_reached_after_failed_read_with_trailing_newline(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        for _ in LINES:
            assert process.read_line()
        assert process.at_end() is False
        assert process.read_line() is False
        assert process.at_end() is True
        assert process.read_line() is False


def test_end_reached_on_last_line_without_newline(tmp_path):
    path = tmp_path / "short.trace"
    path.write_bytes(b"10 R\n20 W")
    with Process(path, 1, 11) as process:
        process.open()
        assert process.read_line()
        assert process.at_end() is False
        assert process.read_line()
        assert process.line == "20 W"
        assert process.at_end() is True
        assert process.read_line() is False


def test_reopen_starts_over(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        first = read_all(process)
        process.open()
        assert process.at_end() is False
        assert process.remaining_instructions == process.estimated_instructions
        assert read_all(process) == first


def test_constructor_opens_file(trace):
    process = Process(trace, 2, 11)
    try:
        assert process.is_open()
        assert process.read_line()
        assert process.line == LINES[0].decode()
    finally:
        process.close()


def test_close_stops_reading(trace):
    process = Process(trace, 0, 11)
    process.close()
    assert process.is_open() is False
    assert process.read_line() is False
    process.close()
    assert process.is_open() is False


def test_context_manager_closes(trace):
    with Process(trace, 0, 11) as process:
        assert process.is_open()
    assert process.is_open() is False


def test_missing_file(tmp_path):
    missing = tmp_path / "absent.trace"
    process = Process(missing, 5, 11)
    assert process.is_open() is False
    assert process.read_line() is False
    with pytest.raises(FileNotFoundError):
        process.open()


def test_attributes_kept(trace):
    with Process(trace, 7, 11) as process:
        assert process.process_id == 7
        assert process.path == os.fspath(trace)
        assert process.avg_bytes_per_line == 11


def test_page_ids_from_read_instructions(trace):
    with Process(trace, 0, 11) as process:
        process.open()
        pages = []
        while process.read_line():
            pages.append(process.current_instruction.page_id(4096))
    assert pages[0] == pages[2]
    assert pages[-1] == 1