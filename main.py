# Entry point for experimenting with the solver:
# Run this file to generate a small coastline and print what got placed.

import logging
from collections import Counter

from wfc import Direction, SolveFailure, SolverSettings, Tile, TileSet, generate
from wfc.logging_config import setup_logging

logger = logging.getLogger("wfc.main")


def create_coast_tiles():
    """Create land, coast and sea tiles that only meet through the coast"""
    sides = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)

    land = Tile("land", frequency=3.0, sockets={d: "land" for d in sides})
    coast = Tile("coast", frequency=1.0, sockets={d: "land,sea" for d in sides})
    sea = Tile("sea", frequency=4.0, sockets={d: "sea" for d in sides})

    return TileSet.from_sockets([land, coast, sea])


def main():
    setup_logging(logging.INFO)

    tileset = create_coast_tiles()
    settings = SolverSettings(width=16, height=8, random_seed=42, random_ratio=0.2)

    try:
        result = generate(tileset, settings)
    except SolveFailure as e:
        logger.error("Generation failed: %s", e)
        return 1

    counts = Counter(tile.name for _, _, tile in result["placements"])
    logger.info("Solved: %s after %d steps", result["solved"], result["steps"])
    for name, count in sorted(counts.items()):
        logger.info("%-6s %d tiles", name, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
