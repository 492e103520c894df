"""Maze Race - race a computer opponent through a procedurally generated maze.

The player navigates a freshly carved maze, then an A* opponent replays an
optimal route and the two runs are scored against each other.
"""

__version__ = "1.0.0"
__author__ = "Maze Race"
