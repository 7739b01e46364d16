#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lattice Confined Fusion Canvas - Interactive Streamlit Application
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Streamlit front end for the palladium lattice viewer.
Users can:
- Choose the lattice extents and lattice constant
- Orbit the camera with elevation/azimuth sliders
- Inspect atom counts and the extent of the lattice
"""

import io
import logging
import streamlit as st
from PIL import Image

from lattice_fusion.lattice import LatticeConfig, PALLADIUM_LATTICE_CONSTANT
from lattice_fusion.logging_config import setup_logging
from lattice_fusion.simulation import LatticeFusionSimulation, SimulationConfig
from lattice_fusion.visualization import RenderConfig, render_lattice_png


# Page configuration
st.set_page_config(
    page_title="Lattice Confined Fusion Canvas",
    page_icon="⚛️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.stApp {
    background-color: #0e1117;
}
.info-text {
    font-size: 14px;
    color: #94a3b8;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'logging_ready' not in st.session_state:
        setup_logging(logging.INFO)
        st.session_state.logging_ready = True
    if 'simulation' not in st.session_state:
        st.session_state.simulation = None
    if 'render_config' not in st.session_state:
        st.session_state.render_config = RenderConfig()


def create_simulation(width: int, height: int, depth: int,
                      lattice_constant: float, point_size: float) -> LatticeFusionSimulation:
    """Create a new simulation with the lattice generated."""
    config = SimulationConfig(
        container_id="streamlit-canvas",
        lattice=LatticeConfig(
            width=width, height=height, depth=depth,
            lattice_constant=lattice_constant,
            point_size=point_size
        ),
        render=st.session_state.render_config
    )

    sim = LatticeFusionSimulation(config)
    sim.initialize()
    # Frames are rendered headless per rerun; the live figure is not needed
    sim.close()
    return sim


def render_sidebar():
    """Render the sidebar with controls."""
    st.sidebar.title("⚛️ Lattice Fusion Canvas")

    st.sidebar.markdown("""
    ---
    ### About
    Palladium crystallizes **face-centred cubic**: each cubic cell of edge
    $a$ holds four atoms at $(0,0,0)$, $(\\tfrac12,\\tfrac12,0)$,
    $(\\tfrac12,0,\\tfrac12)$ and $(0,\\tfrac12,\\tfrac12)$.

    ---
    """)

    st.sidebar.subheader("🧱 Lattice")

    width = st.sidebar.slider("Cells along x", 1, 10, 5)
    height = st.sidebar.slider("Cells along y", 1, 10, 5)
    depth = st.sidebar.slider("Cells along z", 1, 10, 5)

    lattice_constant = st.sidebar.number_input(
        "Lattice constant (Å)",
        min_value=0.5, max_value=10.0,
        value=PALLADIUM_LATTICE_CONSTANT, step=0.01,
        help="Edge length of the cubic cell"
    )

    point_size = st.sidebar.slider(
        "Atom size", min_value=0.1, max_value=3.0, value=0.5, step=0.1
    )

    if st.sidebar.button("🔄 Rebuild Lattice", use_container_width=True) \
            or st.session_state.simulation is None:
        st.session_state.simulation = create_simulation(
            width, height, depth, lattice_constant, point_size
        )

    st.sidebar.markdown("---")
    st.sidebar.subheader("🎥 Camera")

    render_config = st.session_state.render_config
    render_config.show_axes = st.sidebar.checkbox("Show axes", value=True)

    elevation = st.sidebar.slider("Elevation (°)", -90.0, 90.0, 35.3, step=0.5)
    azimuth = st.sidebar.slider("Azimuth (°)", -180.0, 180.0, 45.0, step=1.0)

    return elevation, azimuth


def render_main_content(elevation: float, azimuth: float):
    """Render the lattice view and metrics."""
    sim = st.session_state.simulation
    lattice = sim.palladium_lattice

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("Palladium Lattice")

        img_bytes = render_lattice_png(
            lattice.get_mesh(),
            st.session_state.render_config,
            elevation=elevation,
            azimuth=azimuth
        )
        pil_image = Image.open(io.BytesIO(img_bytes))
        st.image(pil_image, use_container_width=True)

    with col2:
        st.subheader("Structure")

        lo, hi = lattice.bounds

        met1, met2 = st.columns(2)
        with met1:
            st.metric("Atoms", lattice.n_atoms)
        with met2:
            st.metric("Cells", lattice.width * lattice.height * lattice.depth)

        st.metric("Lattice constant", f"{lattice.lattice_constant:.3f} Å")
        st.metric("Extent",
                  f"{hi[0] - lo[0]:.1f} × {hi[1] - lo[1]:.1f} × {hi[2] - lo[2]:.1f} Å")

        st.markdown(
            '<p class="info-text">Hydrogen loading and dynamics are not simulated; '
            'the physics engine is a placeholder.</p>',
            unsafe_allow_html=True
        )


def main():
    """Main application entry point."""
    initialize_session_state()
    elevation, azimuth = render_sidebar()
    render_main_content(elevation, azimuth)


if __name__ == "__main__":
    main()
