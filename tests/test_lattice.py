#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from lattice_fusion.lattice import (
    FCC_BASIS,
    PALLADIUM_LATTICE_CONSTANT,
    LatticeConfig,
    LatticeMesh,
    LatticePoint,
    PalladiumLattice,
    generate_fcc_positions
)


class TestGenerateFccPositions:
    """Tests for the FCC position generator."""

    @pytest.mark.parametrize("dims", [
        (0, 0, 0), (1, 1, 1), (2, 3, 4), (5, 5, 5), (0, 4, 4), (7, 1, 2)
    ])
    def test_point_count(self, dims):
        """Output always holds 4 * w * h * d points."""
        w, h, d = dims
        positions = generate_fcc_positions(w, h, d)
        assert positions.shape == (4 * w * h * d, 3)

    def test_unit_cell(self):
        """A single cell gives the four basis atoms scaled by a."""
        positions = generate_fcc_positions(1, 1, 1)
        expected = np.array([
            [0.0, 0.0, 0.0],
            [1.945, 1.945, 0.0],
            [1.945, 0.0, 1.945],
            [0.0, 1.945, 1.945],
        ])
        np.testing.assert_allclose(positions, expected, atol=1e-12)

    def test_points_are_index_plus_offset(self):
        """Every point is (cell index + basis offset) * a, in loop order."""
        a = PALLADIUM_LATTICE_CONSTANT
        w, h, d = 2, 3, 2
        positions = generate_fcc_positions(w, h, d, a)

        idx = 0
        for x in range(w):
            for y in range(h):
                for z in range(d):
                    for offset in FCC_BASIS:
                        expected = (np.array([x, y, z]) + offset) * a
                        np.testing.assert_allclose(positions[idx], expected, atol=1e-12)
                        idx += 1

    def test_custom_lattice_constant(self):
        """The lattice constant scales every coordinate."""
        unit = generate_fcc_positions(2, 2, 2, 1.0)
        scaled = generate_fcc_positions(2, 2, 2, 2.5)
        np.testing.assert_allclose(scaled, unit * 2.5)

    def test_deterministic(self):
        """Identical inputs give identical output."""
        first = generate_fcc_positions(3, 2, 4)
        second = generate_fcc_positions(3, 2, 4)
        assert np.array_equal(first, second)

    @pytest.mark.parametrize("dims", [(1.5, 1, 1), (1, 2, 0.25), (2, 2.0001, 2)])
    def test_fractional_extent_rejected(self, dims):
        """Non-integral extents raise ValueError instead of truncating."""
        with pytest.raises(ValueError):
            generate_fcc_positions(*dims)

    def test_integral_float_extent_accepted(self):
        """A float holding a whole number counts as that many cells."""
        assert generate_fcc_positions(2.0, 1, 1).shape == (8, 3)

    def test_negative_extent_rejected(self):
        """Negative extents raise ValueError."""
        with pytest.raises(ValueError):
            generate_fcc_positions(-1, 2, 2)
        with pytest.raises(ValueError):
            generate_fcc_positions(-1, -2, 2)


class TestPalladiumLattice:
    """Tests for the PalladiumLattice class."""

    def test_defaults(self):
        """Default lattice is 5x5x5 cells of palladium."""
        lattice = PalladiumLattice()
        assert (lattice.width, lattice.height, lattice.depth) == (5, 5, 5)
        assert lattice.lattice_constant == 3.89

    def test_not_generated(self):
        """Before generate() there is no mesh and no structure."""
        lattice = PalladiumLattice(2, 2, 2)
        assert lattice.get_mesh() is None
        assert lattice.structure is None
        assert lattice.n_atoms == 0
        assert lattice.points() == ()

    def test_generate_default(self):
        """Default lattice holds 500 atoms."""
        lattice = PalladiumLattice()
        mesh = lattice.generate()

        assert isinstance(mesh, LatticeMesh)
        assert lattice.get_mesh() is mesh
        assert lattice.n_atoms == 500
        assert mesh.n_points == 500
        assert mesh.color == "#cccccc"
        assert mesh.size == 0.5

    def test_structure_is_read_only(self):
        """Stored positions cannot be written through."""
        lattice = PalladiumLattice(2, 2, 2)
        lattice.generate()

        with pytest.raises(ValueError):
            lattice.structure[0, 0] = 100.0
        with pytest.raises(ValueError):
            lattice.get_mesh().positions[0, 0] = 100.0

    def test_regenerate_is_identical(self):
        """Generating twice reproduces the same structure."""
        lattice = PalladiumLattice(3, 3, 3)
        first = lattice.generate().positions.copy()
        second = lattice.generate().positions
        assert np.array_equal(first, second)

    def test_points(self):
        """points() returns immutable LatticePoint tuples."""
        lattice = PalladiumLattice(1, 1, 1)
        lattice.generate()
        points = lattice.points()

        assert len(points) == 4
        assert all(isinstance(p, LatticePoint) for p in points)
        assert points[1] == pytest.approx((1.945, 1.945, 0.0))
        with pytest.raises(AttributeError):
            points[0].x = 1.0

    def test_bounds_and_center(self):
        """Bounds span from the origin to the last face-centred atom."""
        lattice = PalladiumLattice(5, 5, 5)
        lattice.generate()
        lo, hi = lattice.bounds

        np.testing.assert_allclose(lo, [0.0, 0.0, 0.0])
        np.testing.assert_allclose(hi, [4.5 * 3.89] * 3)
        np.testing.assert_allclose(lattice.center, [2.25 * 3.89] * 3)

    def test_empty_lattice(self):
        """A zero-sized lattice generates an empty mesh."""
        lattice = PalladiumLattice(0, 3, 3)
        mesh = lattice.generate()
        assert mesh.n_points == 0
        lo, hi = lattice.bounds
        np.testing.assert_allclose(lo, hi)

    def test_from_config(self):
        """Lattice picks up extents and material from a LatticeConfig."""
        config = LatticeConfig(width=2, height=3, depth=4,
                               lattice_constant=4.0, point_color="#ff0000",
                               point_size=1.0)
        lattice = PalladiumLattice.from_config(config)
        mesh = lattice.generate()

        assert config.n_cells == 24
        assert lattice.n_atoms == 96
        assert mesh.color == "#ff0000"
        assert mesh.size == 1.0
        assert lattice.lattice_constant == 4.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
