#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Confined Fusion Canvas - Command Line Interface
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Command line interface for viewing the palladium lattice.
"""

import argparse
import logging
import subprocess
import time
from typing import Optional

from lattice_fusion.lattice import LatticeConfig, PALLADIUM_LATTICE_CONSTANT
from lattice_fusion.logging_config import setup_logging
from lattice_fusion.simulation import LatticeFusionSimulation, SimulationConfig


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Build the simulation configuration from parsed arguments."""
    width = args.width if args.width is not None else args.size
    height = args.height if args.height is not None else args.size
    depth = args.depth if args.depth is not None else args.size

    return SimulationConfig(
        container_id=args.container,
        lattice=LatticeConfig(
            width=width,
            height=height,
            depth=depth,
            lattice_constant=args.constant
        )
    )


def print_summary(sim: LatticeFusionSimulation):
    """Print the lattice summary."""
    lattice = sim.palladium_lattice
    lo, hi = lattice.bounds

    print(f"\nLattice:")
    print(f"  Cells:            {lattice.width} x {lattice.height} x {lattice.depth}")
    print(f"  Lattice constant: {lattice.lattice_constant:.3f} Å")
    print(f"  Atoms:            {lattice.n_atoms}")
    print(f"  Extent:           ({lo[0]:.2f}, {lo[1]:.2f}, {lo[2]:.2f}) -> "
          f"({hi[0]:.2f}, {hi[1]:.2f}, {hi[2]:.2f})")


def run_viewer(config: SimulationConfig, n_frames: Optional[int] = None):
    """
    Open the interactive lattice viewer.

    Args:
        config: Simulation configuration
        n_frames: Number of frames to run (None = until the window is closed)
    """
    print("=" * 60)
    print("Lattice Confined Fusion Canvas - Viewer")
    print("=" * 60)

    sim = LatticeFusionSimulation(config)
    sim.initialize()
    print_summary(sim)

    print("\nDrag to orbit the camera. Close the window to exit.")
    t_start = time.time()
    ani = sim.run(n_frames=n_frames, show=True)
    elapsed = time.time() - t_start

    frames = sim.renderer.frame_count
    print(f"\nRendered {frames} frames in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"Frames per second: {frames / elapsed:.1f}")

    sim.close()
    return ani


def run_snapshot(config: SimulationConfig, output: str):
    """
    Render a single frame of the lattice to a PNG file.

    Args:
        config: Simulation configuration
        output: Path of the PNG file to write
    """
    print("=" * 60)
    print("Lattice Confined Fusion Canvas - Snapshot")
    print("=" * 60)

    sim = LatticeFusionSimulation(config)
    sim.initialize()
    print_summary(sim)

    png = sim.renderer.to_png()
    with open(output, 'wb') as f:
        f.write(png)

    sim.close()
    print(f"\nSnapshot saved to {output}")


def main(argv=None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Lattice Confined Fusion Canvas - 3D Palladium Lattice Viewer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --show              Open the interactive 3D viewer
  python main.py --snapshot pd.png   Render one frame to pd.png
  python main.py --app               Launch Streamlit app
        """
    )

    parser.add_argument('--show', action='store_true',
                       help='Open the interactive 3D viewer')
    parser.add_argument('--snapshot', metavar='PATH',
                       help='Render one frame to a PNG file')
    parser.add_argument('--app', action='store_true',
                       help='Launch Streamlit web app')
    parser.add_argument('--size', '-n', type=int, default=5,
                       help='Lattice cells along each axis (default: 5)')
    parser.add_argument('--width', type=int, default=None,
                       help='Lattice cells along x (overrides --size)')
    parser.add_argument('--height', type=int, default=None,
                       help='Lattice cells along y (overrides --size)')
    parser.add_argument('--depth', type=int, default=None,
                       help='Lattice cells along z (overrides --size)')
    parser.add_argument('--constant', '-a', type=float,
                       default=PALLADIUM_LATTICE_CONSTANT,
                       help=f'Lattice constant in Å (default: {PALLADIUM_LATTICE_CONSTANT})')
    parser.add_argument('--frames', type=int, default=None,
                       help='Stop the viewer after this many frames')
    parser.add_argument('--container', default='simulation-container',
                       help='Identifier of the rendering surface')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Enable debug logging')
    parser.add_argument('--log-file', default=None,
                       help='Also write logs to this file')

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    config = build_config(args)

    if args.snapshot:
        run_snapshot(config, args.snapshot)
    elif args.show:
        run_viewer(config, n_frames=args.frames)
    elif args.app:
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --show, --snapshot, or --app")


if __name__ == "__main__":
    main()
