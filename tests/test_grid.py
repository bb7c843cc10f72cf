"""Tests for plot rendering and the row-group zip."""

from core.farming import grid
from core.farming.grid import CELL_MARK, compose, grid_zip, render_plot
from core.farming.layouts import FarmSize, LayoutRatio
from core.farming.plants import Plant


def _plain(lines):
    return [line.plain for line in lines]


def test_empty_one_one_plot() -> None:
    lines = _plain(render_plot(LayoutRatio.ONE_ONE))
    assert lines == [
        "╔═══╤═══╤═══╗",
        "║   │   │   ║",
        "╟───┼───┼───╢",
        "║   │   │   ║",
        "╟───┼───┼───╢",
        "║   │   │   ║",
        "╚═══╧═══╧═══╝",
    ]


def test_planted_one_one_plot_colors_each_binding() -> None:
    lines = render_plot(LayoutRatio.ONE_ONE, (Plant.TOMA_ROOT, Plant.POTATO))
    assert lines[1].plain == "║ █ │ █ │ █ ║"
    middle = lines[3]
    assert middle.plain == "║ █ │   │ █ ║"
    assert [span.style for span in middle.spans] == [Plant.TOMA_ROOT.color, Plant.POTATO.color]
    assert sum(line.plain.count(CELL_MARK) for line in lines) == 8


def test_block_dimensions() -> None:
    for ratio in LayoutRatio:
        cols, rows = ratio.cell_shape
        lines = render_plot(ratio)
        assert len(lines) == 2 * rows + 1
        assert {len(line.plain) for line in lines} == {4 * cols + 1}


def test_tile_boundaries_are_heavy() -> None:
    lines = _plain(render_plot(LayoutRatio.TWO_ONE))
    assert lines[1] == "║   │   │   ┃   │   │   ║"
    assert lines[2] == "╟───┼───┼───╂───┼───┼───╢"

    lines = _plain(render_plot(LayoutRatio.ONE_ONE_ONE))
    assert lines[6] == "╟━━━┿━━━┿━━━╋━━━┿━━━┿━━━╢"
    assert lines[4] == "╟───┼───┼───╂───┼───┼───╢"


def test_grid_zip_groups_rows() -> None:
    blocks = [[1, 2], [3, 4], [5, 6], [7, 8]]
    assert list(grid_zip(blocks, 2)) == [[1, 3], [2, 4], [5, 7], [6, 8]]


def test_grid_zip_row_ends_at_shortest_block() -> None:
    assert list(grid_zip([[1, 2, 3], [4, 5]], 2)) == [[1, 4], [2, 5]]


def test_grid_zip_partial_last_row() -> None:
    blocks = [["a1", "a2"], ["b1", "b2"], ["c1", "c2"]]
    assert list(grid_zip(blocks, 2)) == [["a1", "b1"], ["a2", "b2"], ["c1"], ["c2"]]


def test_grid_zip_edge_cases() -> None:
    assert list(grid_zip([], 3)) == []
    assert list(grid_zip([[1]], 0)) == []


def test_grid_zip_handles_tall_farms() -> None:
    blocks = [[i] for i in range(5000)]
    rows = list(grid_zip(blocks, 1))
    assert len(rows) == 5000
    assert rows[-1] == [4999]


def test_compose_renders_one_farm_row_at_a_time(monkeypatch) -> None:
    calls = []
    real = grid.render_plot

    def spy(ratio, combo=None):
        calls.append(combo)
        return real(ratio, combo)

    monkeypatch.setattr(grid, "render_plot", spy)
    lines = compose([], LayoutRatio.ONE_ONE, FarmSize(3, 500))
    first = next(lines)
    assert len(first.plain) == 3 * 13 + 2
    assert len(calls) == 3
    rest = list(lines)
    assert len(rest) == 500 * 7 - 1
    assert len(calls) == 1500


def test_compose_narrow_farm_is_empty() -> None:
    assert list(compose([], LayoutRatio.TWO_ONE, FarmSize(1, 3))) == []


def test_compose_layout() -> None:
    size = FarmSize(4, 2)
    lines = _plain(compose([(Plant.TOMA_ROOT, Plant.POTATO)], LayoutRatio.ONE_ONE, size))
    assert len(lines) == 14
    assert {len(line) for line in lines} == {55}
    assert sum(line.count(CELL_MARK) for line in lines) == 8
    # first plot sits top-left
    assert CELL_MARK in lines[1][:13]
    assert CELL_MARK not in lines[8]

    lines = _plain(compose([], LayoutRatio.TWO_ONE, size))
    assert len(lines) == 14
    assert {len(line) for line in lines} == {51}
    assert not any(CELL_MARK in line for line in lines)
