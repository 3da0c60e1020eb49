"""Toroidal continuous space and grid, plus the placement helpers.

The initializer only depends on the ``ContinuousSpace`` and ``GridSpace``
protocols; a host runtime may inject its own stores. ``ToroidalSpace`` and
``ToroidalGrid`` are the reference implementations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from random import Random
from typing import Protocol

Point = tuple[float, float]
Cell = tuple[int, int]


class ContinuousSpace(Protocol):
    """Continuous coordinate store the initializer places agents into."""

    def assign_random_position(self, agent_id: int, rng: Random) -> Point: ...

    def get_position(self, agent_id: int) -> Point: ...


class GridSpace(Protocol):
    """Integer cell store kept in sync with the continuous space."""

    def move_to(self, agent_id: int, x: int, y: int) -> None: ...


@dataclass
class ToroidalSpace:
    """Continuous wrap-around arena ``[0, width) x [0, height)``."""

    width: float
    height: float
    locations: dict[int, Point] = field(default_factory=dict)

    def assign_random_position(self, agent_id: int, rng: Random) -> Point:
        """Draw ``x`` then ``y`` uniformly over the arena and store the point."""
        x = rng.random() * self.width
        y = rng.random() * self.height
        return self.move_to(agent_id, x, y)

    def get_position(self, agent_id: int) -> Point:
        return self.locations[agent_id]

    def move_to(self, agent_id: int, x: float, y: float) -> Point:
        """Store the wrapped point for ``agent_id`` and return it."""
        point = (x % self.width, y % self.height)
        self.locations[agent_id] = point
        return point

    def distance(self, a: Point, b: Point) -> float:
        """Euclidean distance on the torus."""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        dx = min(dx, self.width - dx)
        dy = min(dy, self.height - dy)
        return math.hypot(dx, dy)


@dataclass
class ToroidalGrid:
    """Wrap-around integer grid; several agents may share a cell."""

    width: int
    height: int
    cells: dict[Cell, list[int]] = field(default_factory=dict)
    locations: dict[int, Cell] = field(default_factory=dict)

    def move_to(self, agent_id: int, x: int, y: int) -> None:
        """Move (or first place) ``agent_id`` into the wrapped cell ``(x, y)``."""
        cell = (x % self.width, y % self.height)
        previous = self.locations.get(agent_id)
        if previous is not None:
            occupants = self.cells[previous]
            occupants.remove(agent_id)
            if not occupants:
                del self.cells[previous]
        self.cells.setdefault(cell, []).append(agent_id)
        self.locations[agent_id] = cell

    def get_location(self, agent_id: int) -> Cell:
        return self.locations[agent_id]

    def cell_contents(self, cell: Cell) -> list[int]:
        return list(self.cells.get((cell[0] % self.width, cell[1] % self.height), []))

    def moore_neighborhood(self, cell: Cell, radius: int = 1) -> list[Cell]:
        """Return cells within Chebyshev distance ``radius`` (toroidal, excluding origin).

        Deduplicates wrapped cells, which can collide when radius > grid_dim/2.
        """
        x, y = cell
        seen: set[Cell] = set()
        cells: list[Cell] = []
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                if dx == 0 and dy == 0:
                    continue
                wrapped = ((x + dx) % self.width, (y + dy) % self.height)
                if wrapped == (x % self.width, y % self.height) or wrapped in seen:
                    continue
                seen.add(wrapped)
                cells.append(wrapped)
        return cells


def place(agent_id: int, space: ContinuousSpace, rng: Random) -> Point:
    """Give ``agent_id`` a uniformly random continuous position."""
    return space.assign_random_position(agent_id, rng)


def sync_grid(position: Point) -> Cell:
    """Grid cell of a continuous position: the floor of each coordinate."""
    return (math.floor(position[0]), math.floor(position[1]))
