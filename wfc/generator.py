import logging
from typing import Callable, Dict, Optional, Tuple

from .matrix import Matrix
from .settings import SolverSettings
from .solver import SolveFailure, Solver
from .tile import TileSet

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, Solver], None]


def run(solver: Solver, max_steps: Optional[int] = None,
        step_callback: Optional[StepCallback] = None) -> Tuple[bool, int]:
    '''
    Steps the solver until it reports completion or max_steps steps have been taken.
    Returns whether the grid got solved and how many steps were taken
    '''
    steps = 0
    while max_steps is None or steps < max_steps:
        steps += 1
        if solver.step():
            return True, steps

        # let the caller follow along, e.g. to draw partial results
        if step_callback:
            step_callback(steps, solver)
    return False, steps


def generate(
    tileset: TileSet,
    settings: Optional[SolverSettings] = None,
    step_callback: Optional[StepCallback] = None
) -> Dict:
    settings = (settings or SolverSettings()).validate()

    # Creates a matrix whose cells the solver will fill with every tile on its first step
    matrix = Matrix(settings.width, settings.height, periodic=settings.periodic)
    solver = Solver.from_settings(matrix, tileset, settings)

    try:
        solved, steps = run(solver, settings.max_steps, step_callback)
    except SolveFailure as e:
        logger.warning("Generation of %dx%d grid failed: %s", settings.width, settings.height, e)
        raise

    if not solved:
        logger.info("Stopped after %d steps without finishing", steps)

    # Return the placements of the tiles that were collapsed in the grid
    # plus the tiles they were picked from and the size of the grid
    return {
        "placements": matrix.placements(),
        "tiles": tileset.all_tiles(),
        "size": matrix.size,
        "steps": steps,
        "solved": solved,
    }
