"""
Per-vertex surface normals of a lofted airfoil.

The profile is constant along z, so every normal lies in the xy-plane and is
derived from the neighboring stations of the same surface. Interior stations
average the incoming and outgoing edges. The leading edge joins the two
surfaces, so its tangent runs from the second bottom station through the nose
to the second top station, rather than using a single adjacent edge like the
trailing edge does.

The top surface is traversed from the leading edge to the trailing edge, and
the bottom surface in the opposite direction, so rotating the tangent by +90
degrees gives an outward normal on both.
"""

import numpy as np
from loguru import logger

from pfh.nacamesh.layout import VertexLayout
from pfh.nacamesh.util import tangent_to_normal


__all__ = ["vertex_normals"]


def __dir__():
    return __all__


def _chord_tangents(points):
    """
    Compute the tangents of one surface in the leading-to-trailing direction.

    Parameters
    ----------
    points : array of float, shape (n, 2)
        Stations of the surface, starting at the leading edge.

    Returns
    -------
    summed : array of float, shape (n, 2)
        Sum of the edge vectors on either side of each station. The endpoints
        only have a single edge.
    single : array of float, shape (n, 2)
        The edge vector leaving each station (entering, for the last one).
    """
    edges = np.diff(points, axis=0)

    summed = np.empty(points.shape)
    summed[0] = edges[0]
    summed[1:-1] = edges[:-1] + edges[1:]
    summed[-1] = edges[-1]

    single = np.empty(points.shape)
    single[:-1] = edges
    single[-1] = edges[-1]
    return summed, single


def _surface_normals(summed, single, default):
    with np.errstate(invalid="ignore"):
        normals = tangent_to_normal(summed)

    # Coincident neighbors leave a zero-length tangent
    degenerate = ~normals.any(axis=1)
    if degenerate.any():
        logger.warning(
            "{} vertex normals have coincident neighbors, using fallbacks",
            np.count_nonzero(degenerate),
        )
        with np.errstate(invalid="ignore"):
            normals[degenerate] = tangent_to_normal(single[degenerate])
        for i in np.flatnonzero(~normals.any(axis=1)):
            normals[i] = normals[i - 1] if i > 0 else default
    return normals


def vertex_normals(vertices, n: int):
    """
    Compute an outward unit normal for every vertex of an airfoil prism.

    Parameters
    ----------
    vertices : array of float, shape (4n, 3)
        Vertex locations, arranged as described by `VertexLayout`.
    n : integer
        The number of chord stations.

    Returns
    -------
    normals : array of float, shape (4n, 3)
        Unit vectors with `z = 0`. The back cap normals are copies of the
        front cap normals.
    """
    layout = VertexLayout(n)
    vertices = np.asarray(vertices, dtype=float)
    if vertices.shape != (len(layout), 3):
        raise ValueError(f"`vertices` must have shape ({len(layout)}, 3)")

    i = np.arange(n)
    top = vertices[layout.top_front(i), :2]
    bottom = vertices[layout.bottom_front(i), :2]

    top_summed, top_single = _chord_tangents(top)
    bottom_summed, bottom_single = _chord_tangents(bottom)

    # The surfaces meet at the leading edge, so its tangent crosses the nose
    top_summed[0] = (top[0] - bottom[1]) + (top[1] - top[0])
    bottom_summed[0] = -top_summed[0]

    top_normals = _surface_normals(top_summed, top_single, default=[0.0, 1.0])

    # Reversed neighbor order so the normals point down
    bottom_normals = _surface_normals(
        -bottom_summed, -bottom_single, default=[0.0, -1.0]
    )

    normals = np.zeros((len(layout), 3))
    normals[layout.top_front(i), :2] = top_normals
    normals[layout.bottom_front(i), :2] = bottom_normals
    normals[layout.back] = normals[layout.front]

    logger.debug("Computed {} vertex normals", len(normals))
    return normals
