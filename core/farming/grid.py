# -*- coding: utf-8 -*-
"""Farm grid rendering.

Each plot renders as a fixed-height block of `rich.text.Text` lines. The
farm view interleaves those blocks by text row so that plots in one farm row
sit side by side.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, TypeVar

from rich.text import Text

from core.farming.catalog import Combo
from core.farming.layouts import HOLES_PER_TILE_SIDE, FarmSize, LayoutRatio

T = TypeVar("T")

CELL_MARK = "█"
_DONE = object()


def _tile_edge(index: int) -> bool:
    return index > 0 and index % HOLES_PER_TILE_SIDE == 0


def _border(cols: int, left: str, fill: str, sep: str, right: str) -> Text:
    return Text(left + sep.join([fill * 3] * cols) + right)


def _separator_row(cols: int, heavy_row: bool) -> Text:
    fill = "━" if heavy_row else "─"
    line = Text("╟")
    for c in range(cols):
        if c:
            if _tile_edge(c):
                line.append("╋" if heavy_row else "╂")
            else:
                line.append("┿" if heavy_row else "┼")
        line.append(fill * 3)
    line.append("╢")
    return line


def render_plot(ratio: LayoutRatio, combo: Optional[Combo] = None) -> List[Text]:
    """Box-drawn plot; planted holes show a block in the plant's color."""
    pattern = ratio.pattern
    cols, rows = ratio.cell_shape
    lines: List[Text] = [_border(cols, "╔", "═", "╤", "╗")]
    for r, cells in enumerate(pattern):
        if r:
            lines.append(_separator_row(cols, _tile_edge(r)))
        line = Text("║")
        for c, role in enumerate(cells):
            if c:
                line.append("┃" if _tile_edge(c) else "│")
            line.append(" ")
            if combo is not None and role is not None:
                plant = combo[role]
                line.append(CELL_MARK, style=plant.color)
            else:
                line.append(" ")
            line.append(" ")
        line.append("║")
        lines.append(line)
    lines.append(_border(cols, "╚", "═", "╧", "╝"))
    return lines


def grid_zip(blocks: Sequence[Iterable[T]], row_width: int) -> Iterator[List[T]]:
    """Zip block iterators row-group by row-group.

    Blocks are split into farm rows of `row_width`. Within a row one item is
    drawn from every block per step; the row ends as soon as any of its
    blocks runs dry, then the cursor moves to the next row.
    """
    iterators = [iter(b) for b in blocks]
    if row_width <= 0:
        return
    row = 0
    while row * row_width < len(iterators):
        group = iterators[row * row_width : (row + 1) * row_width]
        items: List[T] = []
        for it in group:
            item = next(it, _DONE)
            if item is _DONE:
                break
            items.append(item)
        else:
            yield items
            continue
        row += 1


def compose(combos: Sequence[Combo], ratio: LayoutRatio, size: FarmSize) -> Iterator[Text]:
    """Farm-wide lines; plot blocks are rendered one farm row at a time."""
    capacity = ratio.filled_size(size)
    row_width = ratio.filled_size_horizontal(size)
    if not capacity or row_width <= 0:
        return
    joiner = Text(" ")
    for start in range(0, capacity, row_width):
        end = min(start + row_width, capacity)
        blocks = [render_plot(ratio, combos[i] if i < len(combos) else None) for i in range(start, end)]
        for parts in grid_zip(blocks, row_width):
            yield joiner.join(parts)
