# tabframe

A small, dependency-free data frame for tabular data. Each column holds values
of a single type: text (`str`), 64-bit floats (`float`), 64-bit integers
(`int`) or booleans (`bool`). Columns keep the order in which they were
defined.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

Build a frame from labels and a mapping of label to values with
`tabframe.frame.new_dataframe`. Every column must be non-empty, hold values of
one type, and be as long as the others.

```python
from tabframe.frame import new_dataframe

df = new_dataframe(
    ["Name", "PPG", "TotalPoints", "YearBorn"],
    {
        "Name": ["Kareem", "Karl", "LeBron"],
        "PPG": [24.6, 25.0, 27.1],
        "TotalPoints": [38387, 36928, 40474],
        "YearBorn": [1947, 1963, 1984],
    },
)

print(df)                    # aligned table: header, separator, rows
print(df.num_rows(), df.num_cols())
print(df.labels())           # ['Name', 'PPG', 'TotalPoints', 'YearBorn']
col = df.column("PPG")       # a copy of the Column
```

In the printed table, numbers are right-aligned and other values left-aligned;
booleans print as `true`/`false`, and floats print without exponents or a
trailing `.0`.

Every operation returns a new frame and leaves the original untouched:

```python
more = df.add_column("LikesPizza", [True, False, True])
names = df.restrict_columns(["Name", "TotalPoints"])
scorers = df.filter("PPG", lambda ppg: ppg > 25.0)
both = df.merge_frame(df)    # labels, their order and column types must match
```

`add_column` refuses a label that already exists, an empty column, and a
column whose length differs from the frame's row count. `restrict_columns([])`
gives an empty frame.

Column computations:

```python
df.median("PPG")                          # median of a numeric column, as a float
df.sub_columns("TotalPoints", "YearBorn") # row-wise differences

total = df.column_op(["TotalPoints"], lambda cols: sum(cols[0]))
```

`column_op` looks up the named columns and passes copies of them, in order,
as a list of `Column` objects to your function; whatever the function returns
is returned to you. `sub_columns` gives integers when both values are
integers and floats otherwise.

### Values and columns

`tabframe.values` holds the building blocks:

- `ValueType` – `STRING`, `F64`, `I64`, `BOOL`
- `value_type_of(value)` – the `ValueType` of a Python value
- `format_value(value)` – the text a value is printed as
- `Column` – a list of values of one type; `add(value)` appends and raises
  `TypeMismatchError` on a value of another type. Columns support `len()` and
  iteration.

### Loading CSV files

`tabframe.frame.read_csv(path, col_types)` reads a comma-separated UTF-8 file
whose first line is the header. `col_types` maps every header label to a
`ValueType`; each cell is trimmed of surrounding whitespace and parsed into
that type. Booleans must be written `true` or `false`. Lines are split on
every comma; quoted fields are not recognised.

### Errors

Failures raise subclasses of `tabframe.errors.DataFrameError`:

- `ColumnNotFoundError` – a label that the frame does not have, or a CSV
  header label missing from `col_types`
- `TypeMismatchError` – mixed types in a column, a cell that cannot be parsed
  into its column's type, or a non-numeric column given to a numeric operation
- `DimensionMismatchError` – columns or rows of differing lengths
- `InvalidOperationError` – empty data, an empty CSV file, duplicate column
  labels and the like
- `CsvError` – part of the hierarchy for CSV problems

A file that cannot be opened raises the usual `OSError`.

### The simpler frame

`tabframe.basic.BasicFrame` keeps plain lists of labels and columns. Its
`read_csv(path, types)` uses type codes (1 text, 2 bool, 3 float, 4 integer)
and handles quoted CSV fields; `render()` returns the labels and rows with a
space after every item. It offers the same `add_column`, `merge_frame`,
`restrict_columns`, `filter`, `column_op`, `median` and `sub_columns`, plus
`find_columns(labels)`, and raises `FrameError` when an operation fails. Its
`median` uses only the float values of a column, and its `sub_columns` skips
rows where either value is not a number.

## Command-line demos

Two commands walk through the operations on basketball statistics and print
each intermediate frame:

```
tabframe [FIRST] [SECOND]
```

reads `data.csv` and `data2.csv` by default, adds a `hall_of_fame` column to
each (10 rows in the first file, 6 in the second are expected), merges,
restricts to `Name` and `TotalPoints`, filters for PPG above 25.0, and prints
the median PPG, the differences `TotalPoints - YearBorn` and the sum of
`TotalPoints`. On an error it prints `Error: ...` and exits with status 1.

```
tabframe-basic [FIRST] [SECOND]
```

does a similar walkthrough with `BasicFrame`, reading `basketball.csv` and
`more_players.csv` by default (5 rows are expected in the first).

Both expect the columns `Name, Number, PPG, YearBorn, TotalPoints, LikesPizza`.

## What it does not do

tabframe keeps everything in memory and only reads CSV: there is no writing
of frames back to files, no indexing by row, no joins on keys, and no
aggregates beyond `median`, `sub_columns` and what you compute through
`column_op`.