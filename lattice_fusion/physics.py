#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physics Engine
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Placeholder for the dynamics of hydrogen loaded into the palladium host.

No model is implemented: there are no particle positions to advance, no
forces and no collisions. The engine only exposes the per-frame hook the
simulation loop calls.
"""

import logging


logger = logging.getLogger(__name__)


class PhysicsEngine:
    """
    Inert physics engine.

    The update hook is called once per frame and does nothing.
    """

    def __init__(self):
        logger.debug("Physics engine created (no dynamics model)")

    def update(self, dt: float = 0.0) -> None:
        """
        Advance the physics by one frame. Currently a no-op.

        Args:
            dt: Frame time step (unused)
        """
        return None
