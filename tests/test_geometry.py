# test_geometry.py

from pinline.display.geometry import CursorPosition, Geometry, output_start


class TestGeometry:

    def test_starts_unready(self):
        assert not Geometry().ready

    def test_recompute_derives_pinned_rows(self):
        geometry = Geometry()

        geometry.recompute(rows=24, columns=80)

        assert geometry.ready
        assert (geometry.total_rows, geometry.total_columns) == (24, 80)
        assert geometry.prompt_row == 24
        assert geometry.status_row == 23
        assert geometry.free_rows == 24

    def test_recompute_resets_free_rows(self):
        geometry = Geometry()
        geometry.recompute(rows=24, columns=80)
        geometry.free_rows = 3

        geometry.recompute(rows=24, columns=80)

        assert geometry.free_rows == 24

    def test_usable_columns_leaves_last_column_free(self):
        geometry = Geometry()
        geometry.recompute(rows=24, columns=80)

        assert geometry.usable_columns == 79


class TestCursorPosition:

    def test_output_start_is_top_left(self):
        assert output_start() == CursorPosition(1, 1)

    def test_copy_is_independent(self):
        pos = CursorPosition(5, 7)
        saved = pos.copy()

        pos.row += 1

        assert saved == CursorPosition(5, 7)
