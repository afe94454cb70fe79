"""
Tests for the in-memory table model.
"""

import copy

from models.csv_model import CSVData, EditResult


class TestConstruction:
    """Counters derived from the rows."""

    def test_counts_from_first_row(self):
        data = CSVData(rows=[["a", "b", "c"], ["d"]])
        assert data.records == 2
        assert data.fields == 3

    def test_empty_table(self):
        data = CSVData()
        assert data.rows == []
        assert data.records == 0
        assert data.fields == 0
        assert list(data.display()) == []


class TestDisplay:
    """Rendering and pagination."""

    def test_display_renders_each_field_with_separator(self, table):
        assert list(table.display()) == ["a, b, c, ", "d, e, f, ", "g, h, i, "]

    def test_display_is_restartable(self, table):
        first = list(table.display())
        table.modify_field(1, 1, "z")
        second = list(table.display())
        assert first[0] == "a, b, c, "
        assert second[0] == "z, b, c, "

    def test_paginate_full_range_matches_display(self, table):
        assert list(table.paginate(1, table.records)) == list(table.display())

    def test_paginate_end_before_start_is_empty(self, table):
        assert list(table.paginate(3, 2)) == []

    def test_paginate_skips_out_of_range_indices(self, table):
        assert list(table.paginate(0, 1)) == ["a, b, c, "]
        assert list(table.paginate(2, 10)) == ["d, e, f, ", "g, h, i, "]
        assert list(table.paginate(-5, -1)) == []
        assert list(table.paginate(4, 8)) == []

    def test_iter_rows_yields_one_based_indices(self, table):
        assert [i for i, _ in table.iter_rows(2, 3)] == [2, 3]


class TestDeleteRow:
    """Row deletion."""

    def test_delete_shrinks_and_shifts(self, table):
        result = table.delete_row(2)
        assert result is EditResult.OK
        assert table.records == 2
        assert table.rows == [["a", "b", "c"], ["g", "h", "i"]]

    def test_delete_first_row(self):
        data = CSVData(rows=[["a", "b", "c"], ["d", "e", "f"]])
        data.delete_row(1)
        assert data.records == 1
        assert data.rows == [["d", "e", "f"]]

    def test_out_of_range_is_noop(self, table):
        before = copy.deepcopy(table.rows)
        for index in (0, -1, table.records + 1):
            assert table.delete_row(index) is EditResult.INDEX_OUT_OF_RANGE
        assert table.rows == before
        assert table.records == 3

    def test_records_tracks_rows(self, table):
        while table.records:
            table.delete_row(1)
        assert table.rows == []
        assert table.delete_row(1) is EditResult.INDEX_OUT_OF_RANGE


class TestModifyField:
    """Field modification."""

    def test_modification_is_localized(self, table):
        before = copy.deepcopy(table.rows)
        assert table.modify_field(2, 3, "x") is EditResult.OK
        for r, row in enumerate(table.rows):
            for c, value in enumerate(row):
                expected = "x" if (r, c) == (1, 2) else before[r][c]
                assert value == expected

    def test_out_of_range_is_noop(self, table):
        before = copy.deepcopy(table.rows)
        for row, col in [(0, 1), (1, 0), (4, 1), (1, 4)]:
            assert table.modify_field(row, col, "x") is EditResult.INDEX_OUT_OF_RANGE
        assert table.rows == before

    def test_short_row_is_noop(self):
        data = CSVData(rows=[["a", "b", "c"], ["d"]])
        assert data.modify_field(2, 3, "x") is EditResult.INDEX_OUT_OF_RANGE
        assert data.rows[1] == ["d"]

    def test_column_beyond_fields_is_noop_even_if_row_is_long(self):
        data = CSVData(rows=[["a"], ["b", "c"]])
        assert data.modify_field(2, 2, "x") is EditResult.INDEX_OUT_OF_RANGE
        assert data.rows[1] == ["b", "c"]


class TestRaggedRows:
    """Validation and explicit normalization."""

    def test_ragged_rows_lists_mismatched_indices(self):
        data = CSVData(rows=[["a", "b"], ["c"], ["d", "e"], ["f", "g", "h"]])
        assert data.ragged_rows() == [2, 4]

    def test_normalize_pads_short_rows(self):
        data = CSVData(rows=[["a", "b"], ["c"], ["f", "g", "h"]])
        assert data.normalize() == 1
        assert data.rows == [["a", "b"], ["c", ""], ["f", "g", "h"]]
        assert data.ragged_rows() == [3]

    def test_normalize_truncate(self):
        data = CSVData(rows=[["a", "b"], ["c"], ["f", "g", "h"]])
        assert data.normalize(fill_value="-", truncate=True) == 2
        assert data.rows == [["a", "b"], ["c", "-"], ["f", "g"]]
        assert data.ragged_rows() == []

    def test_row_at_returns_copy(self, table):
        row = table.row_at(1)
        row[0] = "changed"
        assert table.rows[0][0] == "a"
        assert table.row_at(0) is None
        assert table.row_at(4) is None


class TestPaginationCost:
    """Pagination work depends on the table size, not on the requested numbers."""

    def test_huge_end_returns_existing_rows(self):
        data = CSVData(rows=[["a"], ["b"]])
        assert list(data.paginate(1, 10**12)) == ["a, ", "b, "]

    def test_huge_negative_start(self):
        data = CSVData(rows=[["a"], ["b"]])
        assert list(data.paginate(-10**12, 1)) == ["a, "]

    def test_huge_range_outside_table_is_empty(self):
        data = CSVData(rows=[["a"], ["b"]])
        assert list(data.paginate(10**12, 10**12 + 5)) == []
        assert list(data.iter_rows(-10**12, -1)) == []
