# tile.py - Wave Function Collapse (WFC) Tile System
# This file defines the directions, tiles and tile catalog consumed by the solver

import math
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set


class Direction(Enum):
    '''
    The four compass directions a cell can have a neighbour in.
    Each value is the (dx, dy) offset towards that neighbour.
    '''
    NORTH = (0, 1)    # Forward direction (+Y)
    SOUTH = (0, -1)   # Backward direction (-Y)
    EAST = (1, 0)     # Right direction (+X)
    WEST = (-1, 0)    # Left direction (-X)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITE[self]


# Dictionary mapping each direction to its opposite direction
# Used to interpret adjacency rules from both sides of an edge
OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Socket tokens with a special meaning
WILDCARD = "*"
NOT_ALLOWED = "NA"


def tokenize(value) -> List[str]:
    """
    Parse socket values into tokens.
    Converts various input formats into a list of connection tokens.

    Args:
        value: Input value (string, None, iterable of strings or other type)

    Returns:
        List of token strings
    """
    if value is None:
        return [WILDCARD]  # Wildcard - connects to anything
    if isinstance(value, str):
        # Split comma-separated values and clean them up
        parts = [p.strip() for p in value.split(",") if p.strip()]
        return parts if parts else [WILDCARD]
    if isinstance(value, (set, frozenset, list, tuple)):
        parts = [str(p).strip() for p in value if str(p).strip()]
        return parts if parts else [WILDCARD]
    # Convert other types to string
    return [str(value)]


def sockets_compatible(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> bool:
    """
    Check if two sets of socket tokens are compatible.
    This determines whether two tiles can be placed adjacent to each other.

    Args:
        tokens_a: First set of connection tokens
        tokens_b: Second set of connection tokens

    Returns:
        True if tiles can connect, False otherwise
    """
    tokens_a, tokens_b = set(tokens_a), set(tokens_b)
    # "NA" means "Not Allowed" - these tiles can never connect
    if NOT_ALLOWED in tokens_a or NOT_ALLOWED in tokens_b:
        return False
    # "*" is a wildcard - connects to anything
    if WILDCARD in tokens_a or WILDCARD in tokens_b:
        return True
    # Check if there's any overlap between the token sets
    return not tokens_a.isdisjoint(tokens_b)


class Tile:
    """
    Represents a single tile in the Wave Function Collapse system.
    Each tile knows which tiles may sit next to it in every direction,
    and how often it should be picked relative to the others.

    Tiles compare and hash by identity, two tiles with the same name are
    still different tiles.
    """

    def __init__(self, name: str, frequency: float = 1.0, sockets: Optional[Dict[Direction, Iterable[str]]] = None):
        """
        Initialize a WFC tile.

        Args:
            name: String identifier for the tile
            frequency: Non-negative weight used by weighted selection (higher = more likely)
            sockets: Optional mapping of directions to connection tokens (e.g., {Direction.EAST: "road,grass"})
        """
        frequency = float(frequency)
        if math.isnan(frequency) or math.isinf(frequency) or frequency < 0:
            raise ValueError(f"Tile {name!r} needs a finite, non-negative frequency (got {frequency})")

        self.name = name
        self.frequency = frequency
        self.sockets: Dict[Direction, Set[str]] = {
            direction: set(tokenize((sockets or {}).get(direction)))
            for direction in Direction
        }
        self._neighbors: Dict[Direction, Set["Tile"]] = {direction: set() for direction in Direction}

    def possible_in_direction(self, direction: Direction) -> FrozenSet["Tile"]:
        '''
        Returns the tiles that may legally sit in the given direction from this tile
        '''
        return frozenset(self._neighbors[direction])

    def allow(self, direction: Direction, *tiles: "Tile") -> None:
        '''
        Allows the given tiles to sit in the given direction from this tile
        '''
        self._neighbors[direction].update(tiles)

    def __repr__(self):
        return f"Tile({self.name!r}, frequency={self.frequency})"


def is_legal(tile: Tile, direction: Direction, neighbor: Tile) -> bool:
    '''
    Returns True if the neighbor tile may sit in the given direction from tile
    '''
    return neighbor in tile.possible_in_direction(direction)


class TileSet:
    """
    The full catalog of tiles available to the solver.
    Tiles keep the order they were added in, which is the order the solver
    samples them in.
    """

    def __init__(self, tiles: Iterable[Tile] = ()):
        self._tiles: List[Tile] = []
        self._by_name: Dict[str, Tile] = {}
        self._index: Dict[Tile, int] = {}
        for tile in tiles:
            self.add(tile)

    @classmethod
    def from_sockets(cls, tiles: Iterable[Tile]) -> "TileSet":
        '''
        Builds a catalog whose adjacency rules are derived from the tiles' socket tokens
        '''
        tileset = cls(tiles)
        for tile_a in tileset:                  # for each source tile
            for tile_b in tileset:              # for each neighbor tile
                for direction in Direction:     # for each direction
                    # Get socket tokens for both facing sides
                    socket_a = tile_a.sockets[direction]
                    socket_b = tile_b.sockets[direction.opposite]

                    # Check if tiles are compatible for this direction
                    if sockets_compatible(socket_a, socket_b):
                        tile_a.allow(direction, tile_b)
        return tileset

    @classmethod
    def fully_connected(cls, tiles: Iterable[Tile]) -> "TileSet":
        '''
        Builds a catalog where every tile may sit next to every tile in every direction
        '''
        tileset = cls(tiles)
        for tile in tileset:
            for direction in Direction:
                tile.allow(direction, *tileset)
        return tileset

    def add(self, tile: Tile) -> Tile:
        if tile.name in self._by_name:
            raise ValueError(f"Duplicate tile name {tile.name!r} in tile set")
        self._index[tile] = len(self._tiles)
        self._tiles.append(tile)
        self._by_name[tile.name] = tile
        return tile

    def connect(self, tile: Tile, direction: Direction, neighbor: Tile) -> None:
        '''
        Records that neighbor may sit in direction from tile, and therefore
        that tile may sit in the opposite direction from neighbor
        '''
        for t in (tile, neighbor):
            if t not in self._index:
                raise ValueError(f"{t!r} is not part of this tile set")
        tile.allow(direction, neighbor)
        neighbor.allow(direction.opposite, tile)

    def all_tiles(self) -> List[Tile]:
        return list(self._tiles)

    def get(self, name: str) -> Tile:
        return self._by_name[name]

    def index_of(self, tile: Tile) -> int:
        return self._index[tile]

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __contains__(self, tile) -> bool:
        return tile in self._index
