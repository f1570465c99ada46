'''
Copyright (C) 2025 Fadi SULTAN
fadi.sultan@outlook.com

Created by Fadi SULTAN

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.
'''

from .tile import OPPOSITE, Direction, Tile, TileSet, is_legal, sockets_compatible, tokenize
from .matrix import Cell, Matrix
from .solver import MAX_RECURSION_DEPTH, SolveFailure, Solver, SolverState, weighted_random_selection
from .settings import SolverSettings
from .generator import generate, run

__version__ = "1.0.0"
__all__ = [
    'Direction',
    'OPPOSITE',
    'Tile',
    'TileSet',
    'is_legal',
    'sockets_compatible',
    'tokenize',
    'Cell',
    'Matrix',
    'MAX_RECURSION_DEPTH',
    'SolveFailure',
    'Solver',
    'SolverState',
    'weighted_random_selection',
    'SolverSettings',
    'generate',
    'run',
]
