"""
Unit tests for layout input and output types
"""
import math
import pytest

from rowlayout import (
    Alignment,
    InvalidFractionError,
    ItemSize,
    LayoutSpec,
    Rect,
    RowSpec,
)
from rowlayout.layout import fraction_of, layout


class TestFractionOf:
    """Tests for fraction_of"""

    def test_item_sizes(self):
        assert fraction_of(ItemSize.SMALL) == 0.2
        assert fraction_of(ItemSize.NORMAL) == 0.4

    def test_names_any_case(self):
        assert fraction_of('small') == 0.2
        assert fraction_of(' Normal ') == 0.4
        assert fraction_of('FULL') == 1.0

    def test_raw_fractions(self):
        assert fraction_of(0.25) == 0.25
        assert fraction_of(1) == 1.0

    @pytest.mark.parametrize("value", [0, -0.1, 1.5, math.inf, math.nan, 'huge', None, True, [0.2]])
    def test_rejected_values(self, value):
        with pytest.raises(InvalidFractionError):
            fraction_of(value)


class TestAlignment:
    """Tests for Alignment.parse"""

    def test_parse_names(self):
        assert Alignment.parse('right') is Alignment.RIGHT
        assert Alignment.parse('CENTER') is Alignment.CENTER
        assert Alignment.parse(Alignment.LEFT) is Alignment.LEFT

    def test_unknown_alignment(self):
        with pytest.raises(ValueError, match="justify"):
            Alignment.parse('justify')


class TestSpecs:
    """Tests for RowSpec and LayoutSpec"""

    def test_row_resolves_sizes(self):
        row = RowSpec.of(ItemSize.SMALL, 'normal', 0.3)
        assert row.fractions == (0.2, 0.4, 0.3)
        assert row.item_count == len(row) == 3
        assert row.fraction_total == pytest.approx(0.9)

    def test_invalid_rows_are_representable(self):
        assert RowSpec(()).item_count == 0
        assert RowSpec.of(0.6, 0.6).fraction_total == pytest.approx(1.2)

    def test_invalid_size_in_row(self):
        with pytest.raises(InvalidFractionError):
            RowSpec.of('small', 2.0)

    def test_spec_from_plain_rows(self):
        spec = LayoutSpec.from_rows('left', [['small', 'small'], [0.4]])
        assert spec.alignment is Alignment.LEFT
        assert spec.row_count == 2
        assert spec.item_count == 3
        assert isinstance(spec.rows[1], RowSpec)

    def test_equal_specs_hash_equal(self):
        a = LayoutSpec.from_rows('center', [['small', 'normal']])
        b = LayoutSpec(Alignment.CENTER, (RowSpec.of(0.2, 0.4),))
        assert a == b
        assert hash(a) == hash(b)

    def test_spec_is_immutable(self):
        spec = LayoutSpec.from_rows('left', [['small']])
        with pytest.raises(AttributeError):
            spec.alignment = Alignment.RIGHT


class TestRect:
    """Tests for Rect.intersects"""

    def test_overlap(self):
        assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))

    def test_touching_edges(self):
        assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))
        assert not Rect(0, 0, 10, 10).intersects(Rect(0, 10, 10, 10))

    def test_zero_area(self):
        assert not Rect(5, 5, 0, 0).intersects(Rect(0, 0, 10, 10))
        assert not Rect(0, 0, 10, 10).intersects(Rect(2, 0, 0, 10))

    def test_negative_width_is_standardized(self):
        rect = Rect(10, 0, -4, 10)
        assert (rect.min_x, rect.max_x) == (6, 10)
        assert rect.intersects(Rect(7, 0, 1, 1))
        assert not rect.intersects(Rect(0, 0, 5, 5))


class TestLayoutResult:
    """Tests for LayoutResult helpers"""

    def test_to_dataframe(self, scenario_spec, config):
        df = layout(300, scenario_spec, config).to_dataframe()
        assert list(df.columns) == ['index', 'row', 'column', 'fraction', 'x', 'y', 'width', 'height']
        assert len(df) == 3
        assert df['width'].tolist() == pytest.approx([52, 104, 104])
        assert df['y'].unique().tolist() == [0.0]

    def test_empty_dataframe_keeps_columns(self, config):
        df = layout(300, LayoutSpec.from_rows('left', []), config).to_dataframe()
        assert df.empty
        assert 'height' in df.columns

    def test_rows_grouping(self, demo_spec, config):
        rows = layout(300, demo_spec, config).rows()
        assert [len(r) for r in rows] == [3, 4, 3, 1]
        assert rows[2][1].column == 1
