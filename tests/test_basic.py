import pytest

from tabframe.basic import BasicFrame, FrameError, main
from tabframe.errors import DataFrameError

HEADER = "Name,Number,PPG,YearBorn,TotalPoints,LikesPizza\n"
FIRST_ROWS = (
    "Kareem,33,24.6,1947,38387,true\n"
    "Karl,32,25.0,1963,36928,false\n"
    "LeBron,23,27.1,1984,40474,true\n"
    "Kobe,24,25.0,1978,33643,true\n"
    "Michael,23,30.1,1963,32292,false\n"
)
SECOND_ROWS = "Shaq,34,23.7,1972,28596,true\n"
TYPES = [1, 4, 3, 4, 4, 2]


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def players(tmp_path):
    frame = BasicFrame()
    frame.read_csv(write(tmp_path, "a.csv", HEADER + FIRST_ROWS), TYPES)
    return frame


@pytest.fixture
def small():
    return BasicFrame(["Name", "Score", "Age"], [["a", "b", "c"], [1.5, 3.0, 2.0], [10, 20, 30]])


def test_read_csv_labels_and_types(players):
    assert players.labels == ["Name", "Number", "PPG", "YearBorn", "TotalPoints", "LikesPizza"]
    assert players.columns[0][0] == "Kareem"
    assert players.columns[1][0] == 33 and type(players.columns[1][0]) is int
    assert players.columns[2][1] == 25.0 and type(players.columns[2][1]) is float
    assert players.columns[5] == [True, False, True, True, False]


def test_read_csv_skips_blank_lines(tmp_path):
    frame = BasicFrame()
    frame.read_csv(write(tmp_path, "b.csv", "A,B\n\n1,x\n\n2,y\n"), [4, 1])
    assert frame.columns == [[1, 2], ["x", "y"]]


def test_read_csv_unknown_type(tmp_path):
    frame = BasicFrame()
    with pytest.raises(FrameError) as info:
        frame.read_csv(write(tmp_path, "c.csv", "A\n1\n"), [9])
    assert str(info.value) == "There is an error: Unknown type"
    assert isinstance(info.value, DataFrameError)


def test_read_csv_bad_bool(tmp_path):
    frame = BasicFrame()
    with pytest.raises(ValueError):
        frame.read_csv(write(tmp_path, "d.csv", "A\nyes\n"), [2])


def test_read_csv_too_many_fields(tmp_path):
    frame = BasicFrame()
    with pytest.raises(IndexError):
        frame.read_csv(write(tmp_path, "e.csv", "A\n1,2\n"), [4])


def test_read_csv_missing_file(tmp_path):
    with pytest.raises(OSError):
        BasicFrame().read_csv(tmp_path / "nope.csv", TYPES)


def test_render(small):
    assert small.render() == "Name Score Age \na 1.5 10 \nb 3 20 \nc 2 30 \n"


def test_render_empty():
    assert BasicFrame().render() == "\n"


def test_add_column(small):
    extended = small.add_column("Flag", [True, False, True])
    assert extended.labels == ["Name", "Score", "Age", "Flag"]
    assert extended.columns[-1] == [True, False, True]
    assert small.labels == ["Name", "Score", "Age"]


def test_add_column_length_mismatch(small):
    with pytest.raises(FrameError) as info:
        small.add_column("Flag", [True])
    assert str(info.value) == "There is an error: Column length does not match DataFrame row count"


def test_add_column_to_empty_frame():
    frame = BasicFrame().add_column("X", [1, 2])
    assert frame.labels == ["X"]
    assert frame.columns == [[1, 2]]


def test_merge_frame(small):
    other = BasicFrame(["Name", "Score", "Age"], [["d"], [4.0], [40]])
    merged = small.merge_frame(other)
    assert merged.columns[0] == ["a", "b", "c", "d"]
    assert merged.columns[2] == [10, 20, 30, 40]
    assert len(small.columns[0]) == 3


def test_merge_frame_label_mismatch(small):
    other = BasicFrame(["Name", "Score"], [["d"], [4.0]])
    with pytest.raises(FrameError) as info:
        small.merge_frame(other)
    assert str(info.value) == "There is an error: Column labels do not match"


def test_merge_frame_type_mismatch(small):
    other = BasicFrame(["Name", "Score", "Age"], [["d"], [4], [40]])
    with pytest.raises(FrameError) as info:
        small.merge_frame(other)
    assert str(info.value) == "There is an error: Column types do not match"


def test_merge_frame_bool_is_not_int():
    left = BasicFrame(["A"], [[1]])
    right = BasicFrame(["A"], [[True]])
    with pytest.raises(FrameError):
        left.merge_frame(right)


def test_find_columns(small):
    assert small.find_columns(["Age", "Name"]) == [2, 0]


def test_find_columns_missing(small):
    with pytest.raises(FrameError) as info:
        small.find_columns(["Name", "Height"])
    assert str(info.value) == "There is an error: Column 'Height' not found"


def test_restrict_columns(small):
    restricted = small.restrict_columns(["Age", "Name"])
    assert restricted.labels == ["Age", "Name"]
    assert restricted.columns == [[10, 20, 30], ["a", "b", "c"]]


def test_filter(small):
    kept = small.filter("Age", lambda value: value >= 20)
    assert kept.labels == small.labels
    assert kept.columns == [["b", "c"], [3.0, 2.0], [20, 30]]


def test_filter_missing_column(small):
    with pytest.raises(FrameError):
        small.filter("Height", lambda value: True)


def test_column_op(small):
    assert small.column_op(["Age", "Name"], lambda cols: (sum(cols[0]), cols[1])) == (60, ["a", "b", "c"])


def test_column_op_gets_copies(small):
    small.column_op(["Age"], lambda cols: cols[0].clear())
    assert small.columns[2] == [10, 20, 30]


def test_median_odd(small):
    assert small.median("Score") == 2.0


def test_median_even():
    frame = BasicFrame(["X"], [[4.0, 2.0]])
    assert frame.median("X") == 3.0


def test_median_without_floats(small):
    with pytest.raises(ValueError):
        small.median("Age")


def test_median_missing_column(small):
    with pytest.raises(FrameError):
        small.median("Height")


def test_sub_columns_types():
    frame = BasicFrame(
        ["A", "B", "C"],
        [[5, 5.5, 7, 1], [2, 0.5, 1.5, "x"], [1, 1, 1, 1]],
    )
    result = frame.sub_columns("A", "B")
    assert result == [3, 5.0, 5.5]
    assert type(result[0]) is int
    assert type(result[2]) is float
    assert frame.sub_columns("A", "C")[0] == 4


def test_main_runs(tmp_path, capsys):
    first = write(tmp_path, "basketball.csv", HEADER + FIRST_ROWS)
    second = write(tmp_path, "more.csv", HEADER + SECOND_ROWS)
    assert main([str(first), str(second)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("CSV file loaded successfully\nOriginal DataFrame:\n")
    assert "HallOfFame" in out
    assert "Name TotalPoints \n" in out
    filtered = out.split("Players with PPG > 25.0:\n")[1].split("\n\n")[0]
    assert "LeBron" in filtered and "Michael" in filtered
    assert "Kareem" not in filtered and "Shaq" not in filtered
    assert "Median PPG: 25\n" in out
    assert "TotalPoints - YearBorn:\n" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert capsys.readouterr().err.startswith("Error reading CSV:")


def test_main_wrong_row_count(tmp_path, capsys):
    first = write(tmp_path, "a.csv", HEADER + SECOND_ROWS)
    second = write(tmp_path, "b.csv", HEADER + SECOND_ROWS)
    assert main([str(first), str(second)]) == 1
    assert "Error adding column: There is an error:" in capsys.readouterr().err