"""
Lofting an airfoil profile into a closed triangle mesh.

The profile is copied to a front cap at `z = -1` and a back cap at `z = +1`,
and the two caps are joined by a strip of triangles along the top surface and
another along the bottom surface. The leading and trailing edges have zero
thickness, so the strips meet there and no end faces are needed.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import numpy as np
from loguru import logger

from pfh.nacamesh import orientation
from pfh.nacamesh.airfoil import Profile, generate_profile
from pfh.nacamesh.layout import VertexLayout
from pfh.nacamesh.normals import vertex_normals


__all__ = [
    "AirfoilMesh",
    "build_vertices",
    "build_indices",
    "build_mesh",
]


def __dir__():
    return __all__


@dataclass(frozen=True)
class AirfoilMesh:
    """
    A triangle mesh with one normal per vertex.

    Attributes
    ----------
    vertices : array of float, shape (4n, 3)
        Vertex locations, arranged as described by `VertexLayout`.
    normals : array of float, shape (4n, 3)
        Unit normal of each vertex.
    faces : array of int, shape (4(n-1), 3)
        Zero-based vertex indices of each triangle, counter-clockwise when
        seen from outside the mesh.
    """

    vertices: np.ndarray
    normals: np.ndarray
    faces: np.ndarray

    def __post_init__(self):
        if len(self.vertices) % 4 or len(self.normals) != len(self.vertices):
            raise ValueError("Mismatched vertex and normal buffers")

    @property
    def resolution(self) -> int:
        return len(self.vertices) // 4

    @property
    def layout(self) -> VertexLayout:
        return VertexLayout(self.resolution)

    @property
    def indices(self):
        """The flattened index buffer, shape (12(n-1),)."""
        return self.faces.reshape(-1)

    def z_forward(self) -> AirfoilMesh:
        """Return a copy rotated so "forward" is +z and "up" is +y."""
        return dataclasses.replace(
            self,
            vertices=orientation.z_forward(self.vertices),
            normals=orientation.z_forward(self.normals),
        )


def build_vertices(profile: Profile):
    """
    Compute the vertex locations of the lofted profile.

    Parameters
    ----------
    profile : Profile
        The sampled airfoil.

    Returns
    -------
    vertices : array of float, shape (4n, 3)
        The back cap vertices are exact xy-copies of the front cap vertices.
    """
    n = profile.resolution
    layout = VertexLayout(n)
    i = np.arange(n)

    vertices = np.empty((len(layout), 3))
    vertices[layout.top_front(i), :2] = profile.upper()
    vertices[layout.bottom_front(i), :2] = profile.lower()
    vertices[layout.front, 2] = -1
    vertices[layout.back, :2] = vertices[layout.front, :2]
    vertices[layout.back, 2] = 1
    return vertices


def build_indices(n: int):
    """
    Build the triangles of the top and bottom strips.

    Each chordwise segment contributes two triangles to each strip. All the
    top strip triangles come first, ordered by segment.

    Parameters
    ----------
    n : integer
        The number of chord stations.

    Returns
    -------
    faces : array of int, shape (4(n-1), 3)
    """
    layout = VertexLayout(n)
    i = np.arange(n - 1)
    tf, tb = layout.top_front(i), layout.top_back(i)
    bf, bb = layout.bottom_front(i), layout.bottom_back(i)

    top = np.stack((np.c_[tf, tb, tb + 1], np.c_[tb + 1, tf + 1, tf]), axis=1)
    bottom = np.stack((np.c_[bb, bf, bf + 1], np.c_[bf + 1, bb + 1, bb]), axis=1)
    return np.concatenate((top.reshape(-1, 3), bottom.reshape(-1, 3)))


def build_mesh(request) -> AirfoilMesh:
    """
    Run the whole pipeline for a single airfoil.

    Parameters
    ----------
    request : AirfoilRequest
        The airfoil, the resolution, and the mesh options.

    Returns
    -------
    AirfoilMesh
    """
    profile = generate_profile(request)
    vertices = build_vertices(profile)
    normals = vertex_normals(vertices, request.resolution)
    faces = build_indices(request.resolution)
    mesh = AirfoilMesh(vertices, normals, faces)
    logger.debug(
        "Built mesh with {} vertices and {} triangles",
        len(mesh.vertices),
        len(mesh.faces),
    )
    if request.z_forward:
        mesh = mesh.z_forward()
    return mesh
