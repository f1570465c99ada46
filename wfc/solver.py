import logging
import random
from enum import Enum
from typing import List, Optional, Sequence

from .matrix import Cell, Matrix
from .tile import Direction, Tile, TileSet

logger = logging.getLogger(__name__)

MAX_RECURSION_DEPTH = 10


class SolveFailure(Exception):
    """Raised when the cell picked for collapse has no candidate tiles left.

    The solve that raised it is over, the solver cannot resume it.
    """

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None,
                 message: str = "contradiction: selected cell has no remaining candidates"):
        if x is not None:
            message = f"{message} at ({x}, {y})"
        super().__init__(message)
        self.x = x
        self.y = y


class SolverState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SOLVED = "solved"
    FAILED = "failed"


def weighted_random_selection(options: Sequence[Tile], rng: random.Random) -> Tile:
    '''
    Picks one of the options with a probability proportional to its frequency.
    When every frequency is zero the last option is returned
    '''
    total_frequency = sum(tile.frequency for tile in options)
    if total_frequency <= 0:
        return options[-1]

    value = rng.random() * total_frequency

    # walk the options until the running total reaches the drawn value
    cumulative_frequency = 0.0
    for tile in options:
        cumulative_frequency += tile.frequency
        if value <= cumulative_frequency:
            return tile

    # float rounding can leave the value just above the final running total
    return options[-1]


class Solver:
    """
    Collapses the cells of a matrix one step at a time.

    Every call to step() picks one of the lowest entropy cells, collapses it to
    a single tile and propagates the consequences to the surrounding cells.
    The caller keeps calling step() until it returns True.
    """

    def __init__(self, matrix: Matrix, tileset: TileSet, allow_imperfect: bool = False,
                 random_ratio: float = 0.0, seed: Optional[int] = None,
                 max_depth: int = MAX_RECURSION_DEPTH, rng: Optional[random.Random] = None):
        """
        Args:
            matrix: Matrix to do work on
            tileset: The set of tiles used for rule checking
            allow_imperfect: Keep going past tile conflicts found during propagation instead of emptying the cell
            random_ratio: Ratio of pure random to weighted random picks, where 1 is pure random
            seed: Seed of the randomness, None seeds from the operating system
            max_depth: How far a single propagation pass may travel from the cell it started at
            rng: Random source to use instead of one built from the seed
        """
        if not 0.0 <= random_ratio <= 1.0:
            raise ValueError(f"random_ratio must be within [0, 1] (got {random_ratio})")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative (got {max_depth})")

        self.matrix = matrix
        self.tileset = tileset
        self.allow_imperfect = allow_imperfect
        self.random_ratio = random_ratio
        self.max_depth = max_depth
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = SolverState.NOT_STARTED
        self.cells: List[Cell] = []

    @classmethod
    def from_settings(cls, matrix: Matrix, tileset: TileSet, settings) -> "Solver":
        return cls(
            matrix,
            tileset,
            allow_imperfect=settings.allow_imperfect,
            random_ratio=settings.random_ratio,
            seed=settings.seed,
            max_depth=settings.max_depth,
        )

    @property
    def running(self) -> bool:
        return self.state is SolverState.RUNNING

    def reset(self) -> None:
        '''
        Forgets the current solve, the next step starts over from a fresh grid
        '''
        self.state = SolverState.NOT_STARTED
        self.cells = []

    def step(self) -> bool:
        '''
        Collapses one cell and propagates the result.
        Returns True once no uncollapsed cell is left, False while more steps are needed
        '''
        if self.state is SolverState.SOLVED:
            return True
        if self.state is SolverState.FAILED:
            raise SolveFailure(message="solver already failed, call reset() to start a new solve")
        if self.state is SolverState.NOT_STARTED:
            self._setup()

        for cell in self.cells:
            cell.checked = False

        lowest = self._lowest_entropy_cells()

        # nothing left to collapse: the grid is solved
        if not lowest:
            self.state = SolverState.SOLVED
            logger.info("Solved %dx%d matrix", self.matrix.width, self.matrix.height)
            return True

        # break ties uniformly so no part of the grid is favoured
        chosen_cell = self.rng.choice(lowest)
        if not chosen_cell.options:
            self.state = SolverState.FAILED
            logger.warning("Contradiction at (%d, %d), stopping", chosen_cell.x, chosen_cell.y)
            raise SolveFailure(chosen_cell.x, chosen_cell.y)

        options = self._ordered(chosen_cell.options)
        if self.rng.random() < self.random_ratio:
            pick = self.rng.choice(options)
        else:
            pick = weighted_random_selection(options, self.rng)

        # collapse the chosen cell
        chosen_cell.options = {pick}
        chosen_cell.collapsed = True
        logger.debug("Collapsed (%d, %d) to %s", chosen_cell.x, chosen_cell.y, pick.name)

        self._reduce_entropy(chosen_cell, 0)

        # collapse anything left with a single possibility
        for cell in self.cells:
            if len(cell.options) == 1:
                cell.collapsed = True
                self._reduce_entropy(cell, 0)
        return False

    def _setup(self) -> None:
        # the cell population is captured once per solve
        self.cells = self.matrix.all_cells()
        tiles = self.tileset.all_tiles()
        for cell in self.cells:
            cell.reset(tiles)
        self.state = SolverState.RUNNING
        logger.info("Starting solve of %d cells with %d tiles", len(self.cells), len(tiles))

    def _lowest_entropy_cells(self) -> List[Cell]:
        '''
        Returns every uncollapsed cell sharing the lowest entropy
        '''
        min_entropy = None
        lowest: List[Cell] = []
        for cell in self.cells:
            if cell.collapsed:
                continue
            if min_entropy is None or cell.entropy < min_entropy:
                min_entropy = cell.entropy
                lowest = [cell]
            elif cell.entropy == min_entropy:
                lowest.append(cell)
        return lowest

    def _ordered(self, tiles) -> List[Tile]:
        # catalog order keeps seeded runs independent of set iteration order
        return sorted(tiles, key=self.tileset.index_of)

    def _reduce_entropy(self, cell: Cell, depth: int) -> None:
        '''
        Narrows the neighbours of the cell and recurses into every neighbour that changed.
        The depth cap bounds the work of one pass, later steps carry on from where it stopped
        '''
        if depth > self.max_depth or cell.checked:
            return

        cell.recompute_entropy()
        cell.checked = True

        for neighbor, direction in self.matrix.neighbors_of(cell.x, cell.y):
            if self._check_neighbor_options(cell, neighbor, direction):
                self._reduce_entropy(neighbor, depth + 1)

    def _check_neighbor_options(self, cell: Cell, neighbor: Cell, direction: Direction) -> bool:
        '''
        Removes the neighbour options that no option of the cell allows in the given direction.
        Returns True if the neighbour lost any option
        '''
        if neighbor.collapsed:
            return False

        # every tile some option of the cell allows on that side
        allowed = set()
        for option in cell.options:
            allowed.update(option.possible_in_direction(direction))

        new_options = neighbor.options & allowed

        # conflicts are left in place when imperfect results are accepted
        if self.allow_imperfect and not new_options:
            return False

        if len(new_options) < len(neighbor.options):
            neighbor.options = new_options
            neighbor.recompute_entropy()
            return True
        return False
