from typing import Iterable, List, Optional, Set, Tuple

from .tile import Direction, Tile, is_legal


class Cell:
    """
    One grid position's solving state.

    Attributes:
        x, y: Position of the cell in its matrix
        options: Tiles this cell may still become
        collapsed: True once the cell's final tile has been committed
        checked: Set while a propagation pass has visited the cell
        entropy: Cached uncertainty of the cell, kept in step with options
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.options: Set[Tile] = set()
        self.collapsed = False
        self.checked = False
        self.entropy = 0

    def recompute_entropy(self) -> int:
        '''
        Recomputes the cached entropy from the current options.
        The entropy is the number of remaining options, so an empty cell has the lowest entropy of all
        '''
        self.entropy = len(self.options)
        return self.entropy

    def reset(self, tiles: Iterable[Tile]) -> None:
        '''
        Puts the cell back into its initial state: every tile possible, nothing collapsed
        '''
        self.options = set(tiles)
        self.collapsed = False
        self.checked = False
        self.recompute_entropy()

    @property
    def tile(self) -> Optional[Tile]:
        '''
        Returns the tile of a collapsed cell, None while the cell is still undecided
        '''
        if self.collapsed and len(self.options) == 1:
            return next(iter(self.options))
        return None

    def __repr__(self):
        return f"Cell(x={self.x}, y={self.y}, options={len(self.options)}, collapsed={self.collapsed})"


class Matrix:
    def __init__(self, width: int, height: int, periodic: bool = False):
        if width < 1 or height < 1:
            raise ValueError(f"Matrix needs a positive size (got {width}x{height})")
        self.width, self.height = width, height
        self.periodic = periodic

        # there are width * height cells in the grid, stored row by row
        self.cells: List[Cell] = [Cell(x, y) for y in range(height) for x in range(width)]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def index_of_cell(self, x: int, y: int) -> int:
        '''
        Returns the index of the cell in a given x, y position in the grid
        '''
        return x + self.width * y

    def in_bounds(self, x: int, y: int) -> bool:
        '''
        Returns True if the given x, y position is within the bounds of the grid
        '''
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside a {self.width}x{self.height} matrix")
        return self.cells[self.index_of_cell(x, y)]

    def all_cells(self) -> List[Cell]:
        return list(self.cells)

    def neighbors_of(self, x: int, y: int) -> List[Tuple[Cell, Direction]]:
        '''
        Returns the neighbors of the given x, y position in the grid,
        each paired with the direction from (x, y) towards it
        '''
        neighbors = []
        for direction in Direction:
            nx, ny = x + direction.dx, y + direction.dy
            if self.periodic:
                # wrap around the edges, a 1-wide axis has no neighbours along it
                nx, ny = nx % self.width, ny % self.height
                if (nx, ny) == (x, y):
                    continue
            elif not self.in_bounds(nx, ny):
                continue
            neighbors.append((self.cells[self.index_of_cell(nx, ny)], direction))
        return neighbors

    def is_solved(self) -> bool:
        '''
        Returns True if every cell has been collapsed to a single tile
        '''
        return all(cell.tile is not None for cell in self.cells)

    def placements(self) -> List[Tuple[int, int, Tile]]:
        '''
        Returns the (x, y, tile) placement of every collapsed cell, row by row
        '''
        return [(cell.x, cell.y, cell.tile) for cell in self.cells if cell.tile is not None]

    def violations(self) -> List[Tuple[int, int, Direction, Tile, Tile]]:
        '''
        Returns every pair of adjacent collapsed cells whose tiles break the adjacency rules.
        Only imperfect solves can leave any behind
        '''
        found = []
        for cell in self.cells:
            if cell.tile is None:
                continue
            for neighbor, direction in self.neighbors_of(cell.x, cell.y):
                if neighbor.tile is None:
                    continue
                if not is_legal(cell.tile, direction, neighbor.tile):
                    found.append((cell.x, cell.y, direction, cell.tile, neighbor.tile))
        return found
