"""
Grid entity: the fixed map of empty and wall cells.
"""

from typing import Iterator, List, Sequence, Tuple

from .primitives import CellField, Position


class Grid:
    """
    Fixed-size board of cells.

    Attributes:
        rows: tuple of rows, rows[y][x] is the cell at Position(x, y)
        width, height: board dimensions
    """

    def __init__(self, rows: Sequence[Sequence[CellField]]):
        self.rows: Tuple[Tuple[CellField, ...], ...] = tuple(tuple(row) for row in rows)
        self.height = len(self.rows)
        self.width = len(self.rows[0]) if self.rows else 0

        for y, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(
                    f"Row {y} has {len(row)} cells, expected {self.width}."
                )

    def dimension(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def cell(self, position: Position) -> CellField:
        """
        Return the cell at *position*.

        Raises:
            IndexError: If the position is outside the grid. The explicit
                check keeps negative coordinates from wrapping around.
        """
        if not self.in_bounds(position):
            raise IndexError(f"{position} is outside a {self.width}x{self.height} grid")
        return self.rows[position.y][position.x]

    def on_walls(self, position: Position) -> bool:
        """True when *position* is off the grid or on a wall cell."""
        if not self.in_bounds(position):
            return True
        return self.rows[position.y][position.x] is CellField.WALL

    def free_cells(self) -> Iterator[Position]:
        """Yield every in-bounds, non-wall position in row-major order."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell is CellField.EMPTY:
                    yield Position(x, y)

    def to_lines(self) -> List[str]:
        return ["".join(cell.value for cell in row) for row in self.rows]

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"
