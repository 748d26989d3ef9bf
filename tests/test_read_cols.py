import io

import numpy as np
import pytest

from fdhist.errors import ChannelOpenError, MalformedValue
from fdhist.read_cols import (
    Sample, parse_value, pool_sources, read_files, read_samples, read_source,
    sort_pool)


def lines(*rows):
    return io.StringIO("".join(row + "\n" for row in rows))


def test_read_samples_picks_column_and_tags_source():
    stream = lines("a 1.5 x", "b  -2   y", "c\t3e2\tz")
    samples = list(read_samples(stream, 7, column=2))
    assert samples == [Sample(1.5, 7), Sample(-2.0, 7), Sample(300.0, 7)]


def test_read_samples_skips_blank_lines():
    stream = io.StringIO("1\n\n   \n\t\n2\n")
    assert [s.value for s in read_samples(stream, 0)] == [1.0, 2.0]


@pytest.mark.parametrize("text", ["12", "-3.5", "+.5", "4.", "1e-3", "+2E+06"])
def test_parse_value_accepts_decimal_notation(text):
    assert parse_value("x " + text, 2) == float(text)


@pytest.mark.parametrize("text", ["abc", "nan", "inf", "0x10", "1_000", "1,5", "3.2.1"])
def test_parse_value_rejects_non_numbers(text):
    with pytest.raises(MalformedValue):
        parse_value(text, 1)


def test_malformed_value_names_column_and_line():
    stream = lines("1 2 3", "4 5 six")
    with pytest.raises(MalformedValue) as info:
        list(read_samples(stream, 0, column=3))
    assert info.value.column == 3
    assert info.value.line == "4 5 six"
    assert str(info.value) == "Column 3 is not a number in: 4 5 six"


def test_missing_column_is_malformed():
    with pytest.raises(MalformedValue) as info:
        list(read_samples(lines("1 2"), 0, column=3))
    assert info.value.line == "1 2"


def test_filter_bounds_are_inclusive():
    stream = lines(*[str(i) for i in range(1, 11)])
    values = [s.value for s in read_samples(stream, 0, minimum=3, maximum=7)]
    assert values == [3.0, 4.0, 5.0, 6.0, 7.0]


def test_filter_with_one_bound():
    assert [s.value for s in read_samples(lines("1", "5", "9"), 0, minimum=5)] == [5.0, 9.0]
    assert [s.value for s in read_samples(lines("1", "5", "9"), 0, maximum=5)] == [1.0, 5.0]


def test_read_source_frame_dtypes():
    df = read_source(lines("1", "2"), 3)
    assert list(df.columns) == ["value", "source"]
    assert df["value"].dtype == np.float64
    assert df["source"].dtype == np.int64
    assert df["source"].tolist() == [3, 3]


def test_read_source_empty_stream():
    df = read_source(io.StringIO(""), 0)
    assert len(df) == 0
    assert df["value"].dtype == np.float64


def test_read_files_pools_in_order(tmp_path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("3\n1\n")
    b.write_text("2\n")
    pool = read_files([str(a), str(b)])
    assert pool["value"].tolist() == [3.0, 1.0, 2.0]
    assert pool["source"].tolist() == [0, 0, 1]


def test_read_files_missing_input(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(ChannelOpenError) as info:
        read_files([missing])
    assert info.value.path == missing


def test_pool_sources_all_empty():
    pool = pool_sources([read_source(io.StringIO(""), 0)])
    assert len(pool) == 0
    assert list(pool.columns) == ["value", "source"]


def test_sort_pool_is_stable_and_reindexed():
    pool = pool_sources([
        read_source(lines("5", "1"), 0),
        read_source(lines("1", "0"), 1),
    ])
    pool = sort_pool(pool)
    assert pool["value"].tolist() == [0.0, 1.0, 1.0, 5.0]
    assert pool["source"].tolist() == [1, 0, 1, 0]
    assert pool.index.tolist() == [0, 1, 2, 3]
