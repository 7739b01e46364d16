#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
3D Rendering Module
================================================================================

Project:        Lattice Confined Fusion Canvas
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module wraps a Matplotlib 3D axes as a small scene renderer:
- A scene graph holding the lattice point cloud, lights and an axes helper
- A perspective camera placed in world coordinates and aimed at a target
- Orbit controls that follow mouse rotation of the 3D axes
- One draw per frame, plus PNG export for Streamlit and snapshots

Camera mapping:
    elevation = asin(dz / r),  azimuth = atan2(dy, dx)
    focal length = 1 / tan(fov / 2)

where (dx, dy, dz) is the camera offset from its target and r its length.
The visible half-width at the target is r * tan(fov / 2).
"""

import io
import logging
import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  (registers the 3d projection)
from typing import Tuple, Optional, List, Any
from dataclasses import dataclass, field

from .lattice import LatticeMesh


logger = logging.getLogger(__name__)


# Marker area per unit of point size (points^2)
POINT_SIZE_SCALE = 40.0

AXIS_COLORS = ("#ff0000", "#00ff00", "#0000ff")  # x, y, z


@dataclass
class RenderConfig:
    """Configuration for the renderer."""
    fov: float = 75.0
    near: float = 0.1
    far: float = 1000.0
    camera_position: Tuple[float, float, float] = (30.0, 30.0, 30.0)
    camera_target: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    show_axes: bool = True
    axes_length: float = 20.0
    ambient_light_color: str = "#404040"
    directional_light_color: str = "#ffffff"
    directional_light_intensity: float = 0.5
    directional_light_position: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    background_color: str = "#000000"
    figsize: Tuple[int, int] = (8, 8)
    dpi: int = 100


@dataclass
class AmbientLight:
    color: str = "#404040"
    intensity: float = 1.0


@dataclass
class DirectionalLight:
    color: str = "#ffffff"
    intensity: float = 1.0
    position: Tuple[float, float, float] = (0.0, 1.0, 0.0)


@dataclass
class AxesHelper:
    """Three coloured axis lines from the origin (x red, y green, z blue)."""
    size: float = 1.0


class Scene:
    """Flat scene graph: an ordered list of renderable objects."""

    def __init__(self):
        self.children: List[Any] = []

    def add(self, obj: Any):
        self.children.append(obj)

    def remove(self, obj: Any):
        self.children = [child for child in self.children if child is not obj]

    def __contains__(self, obj: Any) -> bool:
        return any(child is obj for child in self.children)

    def __len__(self) -> int:
        return len(self.children)


@dataclass
class PerspectiveCamera:
    """
    Perspective camera placed in world coordinates.

    Matplotlib has no free camera; position and target are translated into
    view angles, a focal length and axis limits on every sync.
    """
    fov: float = 75.0
    aspect: float = 1.0
    near: float = 0.1
    far: float = 1000.0
    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def set_position(self, x: float, y: float, z: float):
        self.position = np.array([x, y, z], dtype=float)

    def look_at(self, x: float, y: float, z: float):
        self.target = np.array([x, y, z], dtype=float)

    @property
    def offset(self) -> np.ndarray:
        return self.position - self.target

    @property
    def distance(self) -> float:
        return float(np.linalg.norm(self.offset))

    @property
    def elevation(self) -> float:
        """Elevation angle in degrees above the x-y plane."""
        r = self.distance
        if r < 1e-12:
            return 0.0
        return float(np.degrees(np.arcsin(np.clip(self.offset[2] / r, -1.0, 1.0))))

    @property
    def azimuth(self) -> float:
        """Azimuth angle in degrees, measured from +x towards +y."""
        dx, dy, _ = self.offset
        return float(np.degrees(np.arctan2(dy, dx)))

    @property
    def focal_length(self) -> float:
        return float(1.0 / np.tan(np.radians(self.fov) / 2))

    @property
    def half_extent(self) -> float:
        """Half-width of the view volume at the target."""
        return self.distance * float(np.tan(np.radians(self.fov) / 2))

    def orbit_to(self, elevation: float, azimuth: float):
        """Move to the given view angles, keeping distance and target."""
        r = self.distance
        elev = np.radians(elevation)
        azim = np.radians(azimuth)
        self.position = self.target + r * np.array([
            np.cos(elev) * np.cos(azim),
            np.cos(elev) * np.sin(azim),
            np.sin(elev)
        ])


def normalize_view_angles(elevation: float, azimuth: float) -> Tuple[float, float]:
    """
    Fold view angles so elevation lies in [-90, 90].

    Dragging past a pole leaves the axes at |elev| > 90; the same camera
    position is described by 180 - elev with the azimuth turned half way.
    """
    elev = (elevation + 180.0) % 360.0 - 180.0
    azim = azimuth
    if elev > 90.0:
        elev = 180.0 - elev
        azim += 180.0
    elif elev < -90.0:
        elev = -180.0 - elev
        azim += 180.0
    azim = (azim + 180.0) % 360.0 - 180.0
    return elev, azim


class OrbitControls:
    """
    Orbit controls for a 3D axes.

    Mouse dragging is handled by Matplotlib, which rotates the axes view.
    update() copies that rotation back into the camera so the camera stays
    the single source of truth for the view.
    """

    def __init__(self, camera: PerspectiveCamera, ax: plt.Axes):
        self.camera = camera
        self.ax = ax
        self.enabled = True
        self.sync_view()

    def sync_view(self):
        """Push the camera state into the axes."""
        cam = self.camera
        self.ax.view_init(elev=cam.elevation, azim=cam.azimuth)
        self.ax.set_proj_type('persp', focal_length=cam.focal_length)

        half = cam.half_extent
        tx, ty, tz = cam.target
        self.ax.set_xlim(tx - half, tx + half)
        self.ax.set_ylim(ty - half, ty + half)
        self.ax.set_zlim(tz - half, tz + half)

    def update(self) -> bool:
        """
        Apply accumulated user rotation to the camera.

        Returns:
            True if the camera moved
        """
        if not self.enabled:
            return False

        elev, azim = normalize_view_angles(float(self.ax.elev), float(self.ax.azim))
        d_azim = (azim - self.camera.azimuth + 180.0) % 360.0 - 180.0
        if np.isclose(elev, self.camera.elevation) and np.isclose(d_azim, 0.0):
            return False

        self.camera.orbit_to(elev, azim)
        return True


class Renderer:
    """
    Scene renderer mounted on a Matplotlib figure.

    The container identifier names the figure; an existing figure with the
    same label is reused and cleared.
    """

    def __init__(self, container_id: str, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self.container_id = container_id
        self.frame_count = 0

        cfg = self.config
        self.figure = plt.figure(num=container_id, figsize=cfg.figsize, dpi=cfg.dpi)
        self.figure.clf()
        self.figure.patch.set_facecolor(cfg.background_color)

        self.ax = self.figure.add_axes([0, 0, 1, 1], projection='3d')
        self.ax.set_facecolor(cfg.background_color)
        self.ax.set_box_aspect((1, 1, 1))
        self.ax.set_axis_off()

        self.scene = Scene()

        width, height = cfg.figsize
        self.camera = PerspectiveCamera(
            fov=cfg.fov, aspect=width / height, near=cfg.near, far=cfg.far
        )
        self.camera.set_position(*cfg.camera_position)
        self.camera.look_at(*cfg.camera_target)

        self.controls = OrbitControls(self.camera, self.ax)

        self.scene.add(AmbientLight(cfg.ambient_light_color))
        self.scene.add(DirectionalLight(
            cfg.directional_light_color,
            cfg.directional_light_intensity,
            cfg.directional_light_position
        ))

        if cfg.show_axes:
            self.add_to_scene(AxesHelper(cfg.axes_length))

        logger.info("Renderer mounted on '%s'", container_id)

    def add_to_scene(self, obj: Any):
        """Add an object to the scene graph and draw it onto the axes."""
        self.scene.add(obj)

        if isinstance(obj, LatticeMesh):
            draw_point_cloud(self.ax, obj)
        elif isinstance(obj, AxesHelper):
            draw_axes_helper(self.ax, obj.size)
        # Lights carry no geometry: point clouds are drawn unlit

    def render(self):
        """Update controls from user input and draw one frame."""
        self.controls.update()
        self.figure.canvas.draw_idle()
        self.frame_count += 1

    def to_png(self) -> bytes:
        """Draw the current frame and return it as PNG bytes."""
        self.render()

        buf = io.BytesIO()
        self.figure.savefig(buf, format='png', dpi=self.config.dpi,
                            facecolor=self.figure.get_facecolor(),
                            edgecolor='none')
        buf.seek(0)
        return buf.getvalue()

    def close(self):
        plt.close(self.figure)


def draw_point_cloud(ax: plt.Axes, mesh: LatticeMesh):
    """
    Draw a point cloud onto a 3D axes.

    Args:
        ax: Target 3D axes
        mesh: Positions and material of the points

    Returns:
        The scatter collection (None for an empty mesh)
    """
    positions = mesh.positions
    if positions.shape[0] == 0:
        return None

    return ax.scatter(
        positions[:, 0], positions[:, 1], positions[:, 2],
        s=POINT_SIZE_SCALE * mesh.size,
        c=mesh.color,
        depthshade=False,
        linewidths=0
    )


def draw_axes_helper(ax: plt.Axes, size: float):
    """Draw x, y, z axis lines of the given length from the origin."""
    lines = []
    for axis, color in enumerate(AXIS_COLORS):
        end = np.zeros(3)
        end[axis] = size
        line, = ax.plot([0, end[0]], [0, end[1]], [0, end[2]],
                        color=color, linewidth=1.5)
        lines.append(line)
    return lines


def render_lattice_png(
    mesh: LatticeMesh,
    config: Optional[RenderConfig] = None,
    elevation: Optional[float] = None,
    azimuth: Optional[float] = None,
    container_id: str = "lattice-snapshot"
) -> bytes:
    """
    Render a lattice mesh once and return PNG bytes for Streamlit.

    Args:
        mesh: Lattice point cloud
        config: Render configuration
        elevation: Optional view elevation in degrees (overrides camera)
        azimuth: Optional view azimuth in degrees (overrides camera)
        container_id: Figure label used while rendering

    Returns:
        PNG image as bytes
    """
    renderer = Renderer(container_id, config)
    try:
        renderer.add_to_scene(mesh)

        if elevation is not None or azimuth is not None:
            cam = renderer.camera
            renderer.camera.orbit_to(
                cam.elevation if elevation is None else elevation,
                cam.azimuth if azimuth is None else azimuth
            )
            renderer.controls.sync_view()

        return renderer.to_png()
    finally:
        renderer.close()
