#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Fusion Simulation
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Composition root: builds the palladium lattice once, mounts it on the
renderer, and redraws on every animation frame.
"""

import itertools
import logging
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from typing import Optional, List
from dataclasses import dataclass, field

from .lattice import (
    PalladiumLattice,
    LatticeConfig,
    LatticePoint,
    PALLADIUM_LATTICE_CONSTANT
)
from .physics import PhysicsEngine
from .visualization import Renderer, RenderConfig


logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for the lattice simulation."""
    container_id: str = "simulation-container"
    lattice: LatticeConfig = field(default_factory=LatticeConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    # Delay between animation frames in milliseconds (~60 fps)
    frame_interval_ms: int = 16


class LatticeFusionSimulation:
    """
    Lattice confined fusion scene.

    Holds the host lattice, the (currently empty) set of loaded hydrogen
    atoms, the renderer and the physics engine.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        self.palladium_lattice: Optional[PalladiumLattice] = None
        self.hydrogen_atoms: List[LatticePoint] = []
        self.renderer: Optional[Renderer] = None
        self.physics: Optional[PhysicsEngine] = None

    @property
    def container_id(self) -> str:
        return self.config.container_id

    @property
    def initialized(self) -> bool:
        return self.renderer is not None

    def initialize(self) -> "LatticeFusionSimulation":
        """Build renderer, physics and lattice, and add the lattice to the scene."""
        self.renderer = Renderer(self.container_id, self.config.render)
        self.physics = PhysicsEngine()

        self.palladium_lattice = PalladiumLattice.from_config(self.config.lattice)
        self.palladium_lattice.generate()
        self.renderer.add_to_scene(self.palladium_lattice.get_mesh())

        logger.info("Simulation initialized in '%s'", self.container_id)
        return self

    def update(self):
        """Advance one frame: physics hook, then draw."""
        if not self.initialized:
            raise RuntimeError("Simulation not initialized")

        self.physics.update(self.config.frame_interval_ms / 1000.0)
        self.renderer.render()

    def run(self, n_frames: Optional[int] = None, show: bool = True) -> FuncAnimation:
        """
        Drive update() from the figure's animation timer.

        Args:
            n_frames: Number of frames to run (None = until the window closes)
            show: Whether to open the window and block on it

        Returns:
            The running animation (keep a reference while it plays)
        """
        if not self.initialized:
            self.initialize()

        frames = itertools.count() if n_frames is None else range(n_frames)

        def animate(frame):
            self.update()
            return []

        ani = FuncAnimation(
            self.renderer.figure, animate,
            frames=frames,
            interval=self.config.frame_interval_ms,
            blit=False,
            repeat=False,
            cache_frame_data=False
        )

        if show:
            logger.info("Entering render loop")
            plt.show()

        return ani

    def close(self):
        if self.renderer is not None:
            self.renderer.close()


def create_lattice_simulation(
    size: int = 5,
    lattice_constant: float = PALLADIUM_LATTICE_CONSTANT,
    container_id: str = "simulation-container",
    render_config: Optional[RenderConfig] = None
) -> LatticeFusionSimulation:
    """
    Create an initialized simulation with a cubic block of lattice cells.

    Args:
        size: Number of cells along each axis
        lattice_constant: Cell edge length
        container_id: Identifier of the rendering surface
        render_config: Optional renderer configuration

    Returns:
        Initialized LatticeFusionSimulation
    """
    config = SimulationConfig(
        container_id=container_id,
        lattice=LatticeConfig(
            width=size, height=size, depth=size,
            lattice_constant=lattice_constant
        ),
        render=render_config or RenderConfig()
    )

    sim = LatticeFusionSimulation(config)
    sim.initialize()

    return sim
