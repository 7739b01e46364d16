#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physics Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import pytest
from lattice_fusion.physics import PhysicsEngine


class TestPhysicsEngine:
    """Tests for the placeholder physics engine."""

    def test_update_is_noop(self):
        """update() returns nothing and changes no state."""
        engine = PhysicsEngine()
        state = dict(vars(engine))

        assert engine.update() is None
        assert engine.update(0.016) is None
        assert vars(engine) == state


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
