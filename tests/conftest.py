"""Shared pytest fixtures for wfc tests."""

import pytest

from wfc import Direction, Matrix, Tile, TileSet


SIDES = tuple(Direction)


@pytest.fixture
def open_tileset() -> TileSet:
    """Two tiles that may sit next to anything, in every direction."""
    return TileSet.fully_connected([Tile("grass", 1.0), Tile("dirt", 1.0)])


@pytest.fixture
def hostile_tileset() -> TileSet:
    """Two tiles without a single adjacency rule: no pair is ever legal."""
    return TileSet([Tile("fire", 1.0), Tile("ice", 1.0)])


@pytest.fixture
def coast_tileset() -> TileSet:
    """Land and sea only meet through coast, and coast fits everywhere."""
    return TileSet.from_sockets([
        Tile("land", 3.0, sockets={d: "land" for d in SIDES}),
        Tile("coast", 1.0, sockets={d: "land,sea" for d in SIDES}),
        Tile("sea", 4.0, sockets={d: "sea" for d in SIDES}),
    ])


@pytest.fixture
def stripe_tileset() -> TileSet:
    """Two tiles that only accept their own kind as neighbours."""
    return TileSet.from_sockets([
        Tile("a", 1.0, sockets={d: "a" for d in SIDES}),
        Tile("b", 1.0, sockets={d: "b" for d in SIDES}),
    ])


@pytest.fixture
def pair_matrix() -> Matrix:
    """Two cells side by side."""
    return Matrix(2, 1)
