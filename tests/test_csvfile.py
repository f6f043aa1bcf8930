import pytest

from brumby.csvfile import CsvReader, CsvWriter, Record


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "data.csv"
    rows = [["a", "b", "c"], ["1", "2", "3"], ["x"]]
    with CsvWriter(path) as writer:
        for row in rows:
            writer.append(row)
        writer.flush()
    with CsvReader(path) as reader:
        records = list(reader)
    assert [record.items for record in records] == rows


def test_written_bytes(tmp_path):
    path = tmp_path / "data.csv"
    with CsvWriter(path) as writer:
        writer.append(["a", "b"])
    assert path.read_bytes() == b"a,b\n"


def test_read_returns_none_at_end(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"p,q\n")
    reader = CsvReader(path)
    try:
        assert reader.read() == Record(["p", "q"])
        assert reader.read() is None
    finally:
        reader.close()


def test_read_strips_crlf_and_handles_missing_final_newline(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"p,q\r\nr,s")
    with CsvReader(path) as reader:
        records = list(reader)
    assert records == [Record(["p", "q"]), Record(["r", "s"])]


def test_empty_line_yields_single_empty_value(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"\n")
    with CsvReader(path) as reader:
        records = list(reader)
    assert records == [Record([""])]


def test_empty_file_yields_nothing(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"")
    with CsvReader(path) as reader:
        assert list(reader) == []


def test_open_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvReader(tmp_path / "absent.csv")


def test_record_with_capacity_and_set():
    record = Record.with_capacity(3)
    assert len(record) == 3
    assert list(record) == ["", "", ""]
    record.set(1, 42)
    assert record[1] == "42"
    record[2] = "z"
    assert list(record) == ["", "42", "z"]


def test_record_with_values_converts_to_str():
    record = Record.with_values([1, 2.5, "c"])
    assert list(record) == [str(1), str(2.5), "c"]


def test_record_index_out_of_range():
    record = Record.with_capacity(1)
    with pytest.raises(IndexError):
        record.set(1, "v")


def test_record_round_trip_through_file(tmp_path):
    path = tmp_path / "data.csv"
    original = Record.with_values(["alpha", 7, "gamma"])
    with CsvWriter(path) as writer:
        writer.append(original)
    with CsvReader(path) as reader:
        assert next(reader) == original
        with pytest.raises(StopIteration):
            next(reader)