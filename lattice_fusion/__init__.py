#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Confined Fusion Canvas
================================================================================

Project:        Lattice Confined Fusion Canvas
Description:    Interactive 3D view of a palladium host lattice for lattice
                confined fusion experiments

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This package renders a palladium crystal as a 3D point lattice:
- Face-centred cubic lattice generation with a Numba kernel
- Matplotlib 3D scene with a perspective camera and orbit controls
- Placeholder physics engine hooked into the frame loop

Modules:
    - lattice: Palladium FCC point lattice generation
    - visualization: Scene graph, camera, controls and rendering
    - physics: Physics engine placeholder
    - simulation: Composition root and animation loop
    - logging_config: Package logger setup
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
