#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Palladium Lattice Generator
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         lattice.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module builds the palladium host lattice as a static point cloud.

Palladium crystallizes face-centred cubic. Each cubic cell of edge a
contributes four atoms, at the fractional positions:

    (0, 0, 0), (1/2, 1/2, 0), (1/2, 0, 1/2), (0, 1/2, 1/2)

so a block of W x H x D cells holds exactly 4 * W * H * D atoms, with

    r = (i + u, j + v, k + w) * a

for cell indices (i, j, k) and basis offset (u, v, w). The lattice
constant of palladium is a = 3.89 Angstrom.
"""

import logging
import numpy as np
from numba import jit
from typing import NamedTuple, Optional, Tuple
from dataclasses import dataclass


logger = logging.getLogger(__name__)


PALLADIUM_LATTICE_CONSTANT = 3.89  # Angstrom

# Fractional offsets of the four atoms in each conventional cell
FCC_BASIS = np.array([
    [0.0, 0.0, 0.0],
    [0.5, 0.5, 0.0],
    [0.5, 0.0, 0.5],
    [0.0, 0.5, 0.5],
])


class LatticePoint(NamedTuple):
    """A single atom site. Position only, no identity."""
    x: float
    y: float
    z: float


@dataclass
class LatticeConfig:
    """Configuration for the host lattice."""
    width: int = 5
    height: int = 5
    depth: int = 5
    lattice_constant: float = PALLADIUM_LATTICE_CONSTANT
    point_color: str = "#cccccc"
    point_size: float = 0.5

    @property
    def n_cells(self) -> int:
        return self.width * self.height * self.depth


@dataclass(frozen=True, eq=False)
class LatticeMesh:
    """Renderable point cloud: positions plus material."""
    positions: np.ndarray
    color: str = "#cccccc"
    size: float = 0.5

    @property
    def n_points(self) -> int:
        return self.positions.shape[0]


@jit(nopython=True, cache=True)
def _fill_fcc_positions(
    width: int,
    height: int,
    depth: int,
    lattice_constant: float,
    basis: np.ndarray
) -> np.ndarray:
    n_basis = basis.shape[0]
    positions = np.empty((n_basis * width * height * depth, 3))
    idx = 0

    for x in range(width):
        for y in range(height):
            for z in range(depth):
                for b in range(n_basis):
                    positions[idx, 0] = (x + basis[b, 0]) * lattice_constant
                    positions[idx, 1] = (y + basis[b, 1]) * lattice_constant
                    positions[idx, 2] = (z + basis[b, 2]) * lattice_constant
                    idx += 1

    return positions


def generate_fcc_positions(
    width: int,
    height: int,
    depth: int,
    lattice_constant: float = PALLADIUM_LATTICE_CONSTANT
) -> np.ndarray:
    """
    Generate atom positions for a block of face-centred cubic cells.

    Cells are visited x outermost, z innermost; each cell emits its four
    basis atoms in FCC_BASIS order.

    Args:
        width: Number of cells along x
        height: Number of cells along y
        depth: Number of cells along z
        lattice_constant: Cell edge length

    Returns:
        (4 * width * height * depth) x 3 array of positions

    Raises:
        ValueError: If any extent is negative or not a whole number
    """
    for name, value in (("width", width), ("height", height), ("depth", depth)):
        if int(value) != value:
            raise ValueError(f"Lattice {name} must be a whole number of cells, got {value}")
        if value < 0:
            raise ValueError(f"Lattice {name} must be non-negative, got {value}")

    return _fill_fcc_positions(
        int(width), int(height), int(depth), float(lattice_constant), FCC_BASIS
    )


class PalladiumLattice:
    """
    Palladium host lattice.

    Generated once, then treated as read-only: the stored structure and
    the mesh share one non-writeable position array.
    """

    def __init__(
        self,
        width: int = 5,
        height: int = 5,
        depth: int = 5,
        lattice_constant: float = PALLADIUM_LATTICE_CONSTANT,
        point_color: str = "#cccccc",
        point_size: float = 0.5
    ):
        self.width = width
        self.height = height
        self.depth = depth
        self.lattice_constant = lattice_constant
        self.point_color = point_color
        self.point_size = point_size
        self.structure: Optional[np.ndarray] = None
        self.mesh: Optional[LatticeMesh] = None

    @classmethod
    def from_config(cls, config: LatticeConfig) -> "PalladiumLattice":
        return cls(
            config.width, config.height, config.depth,
            lattice_constant=config.lattice_constant,
            point_color=config.point_color,
            point_size=config.point_size
        )

    def generate(self) -> LatticeMesh:
        """
        Compute the atom positions and build the point cloud mesh.

        Returns:
            The generated mesh
        """
        positions = generate_fcc_positions(
            self.width, self.height, self.depth, self.lattice_constant
        )
        positions.flags.writeable = False

        self.structure = positions
        self.mesh = LatticeMesh(
            positions=positions,
            color=self.point_color,
            size=self.point_size
        )

        logger.info(
            "Generated %dx%dx%d palladium lattice: %d atoms (a = %.3f)",
            self.width, self.height, self.depth,
            self.n_atoms, self.lattice_constant
        )
        return self.mesh

    def get_mesh(self) -> Optional[LatticeMesh]:
        return self.mesh

    def points(self) -> Tuple[LatticePoint, ...]:
        """Stored structure as a tuple of LatticePoint (empty before generate)."""
        if self.structure is None:
            return ()
        return tuple(LatticePoint(*map(float, row)) for row in self.structure)

    @property
    def n_atoms(self) -> int:
        if self.structure is None:
            return 0
        return self.structure.shape[0]

    @property
    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """(min corner, max corner) of the generated atoms."""
        if self.structure is None or self.n_atoms == 0:
            return np.zeros(3), np.zeros(3)
        return self.structure.min(axis=0), self.structure.max(axis=0)

    @property
    def center(self) -> np.ndarray:
        lo, hi = self.bounds
        return (lo + hi) / 2
