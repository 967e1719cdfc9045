"""Tests for the printable ASCII pair matrix."""

import pytest

from unicode_table.matrix import MATRIX_END, MATRIX_START, build_matrix, matrix_chars


class TestBuildMatrix:
    def test_range_constants(self):
        assert MATRIX_START == 32
        assert MATRIX_END == 127
        assert len(matrix_chars()) == 96

    @pytest.mark.parametrize("separator", [chr(0x200D), chr(0x200B), "-", chr(0x1F600)])
    def test_shape_is_96_by_96(self, separator):
        matrix = build_matrix(separator)
        assert len(matrix) == 96
        assert all(len(row) == 96 for row in matrix)

    def test_first_cell_is_two_spaces_around_separator(self):
        matrix = build_matrix(chr(0x200D))
        assert matrix[0][0] == " " + chr(0x200D) + " "

    def test_last_cell(self):
        matrix = build_matrix("|")
        assert matrix[95][95] == chr(127) + "|" + chr(127)

    @pytest.mark.parametrize("i,j", [(0, 95), (33, 65), (65, 33), (94, 1)])
    def test_cell_formula(self, i, j):
        matrix = build_matrix("+")
        assert matrix[i][j] == chr(32 + i) + "+" + chr(32 + j)

    def test_rows_share_left_character(self):
        matrix = build_matrix("+")
        assert {cell[0] for cell in matrix[33]} == {"A"}

    def test_deterministic(self):
        assert build_matrix(chr(0x200C)) == build_matrix(chr(0x200C))

    def test_is_immutable(self):
        matrix = build_matrix("+")
        assert isinstance(matrix, tuple)
        assert isinstance(matrix[0], tuple)
