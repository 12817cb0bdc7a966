import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

import numpy as np


__all__ = [
    "plot_profile",
    "plot_mesh",
]


def __dir__():
    return __all__


def _set_axes_equal(ax):
    """
    Set equal scaling for 3D plot axes.

    This ensures that spheres appear as spheres, cubes as cubes, etc.  This is
    one possible solution to Matplotlib's ``ax.set_aspect('equal')`` and
    ``ax.axis('equal')`` not working for 3D.

    Must be called after the data has been plotted, since that establishes the
    baseline axes limits. This function then computes a bounding sphere over
    those axes, and scales each axis until they have equal scales.

    Original source: https://stackoverflow.com/a/31364297.

    Parameters
    ----------
    ax: matplotlib axis
        The axes to equalize.
    """
    limits = np.array([ax.get_xlim3d(), ax.get_ylim3d(), ax.get_zlim3d()])
    middles = limits.mean(axis=1)

    # The plot bounding box is a sphere in the sense of the infinity
    # norm, hence I call half the max range the plot radius.
    plot_radius = 0.5 * np.max(np.abs(limits[:, 1] - limits[:, 0]))

    ax.set_xlim3d([middles[0] - plot_radius, middles[0] + plot_radius])
    ax.set_ylim3d([middles[1] - plot_radius, middles[1] + plot_radius])
    ax.set_zlim3d([middles[2] - plot_radius, middles[2] + plot_radius])


def plot_profile(profile, ax=None):
    """
    Plot the sampled stations of an airfoil profile.

    Parameters
    ----------
    profile : Profile
        The sampled airfoil.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. If omitted a new figure is created and shown.

    Returns
    -------
    list of matplotlib.lines.Line2D
        The plotted lines, only when `ax` was provided.
    """
    if ax is None:
        fig, ax = plt.subplots()
        independent_plot = True
    else:
        independent_plot = False

    upper = profile.upper().T
    lower = profile.lower().T
    ax.plot(upper[0], upper[1], c="b", lw=0.75, marker=".", ms=2)
    ax.plot(lower[0], lower[1], c="r", lw=0.75, marker=".", ms=2)
    ax.plot(
        profile.x,
        profile.camber,
        label="mean camber line",
        color="k",
        linestyle="--",
        linewidth=0.75,
    )

    ax.set_title(f"NACA {profile.code}")
    ax.set_aspect("equal")
    ax.margins(x=0.1, y=0.40)
    ax.legend()
    ax.grid(True)

    if independent_plot:
        plt.show()
    else:
        return ax.lines


def plot_mesh(mesh, ax=None, show_normals=False):
    """
    Plot the triangles of an airfoil mesh in 3D.

    Parameters
    ----------
    mesh : AirfoilMesh
        The mesh to draw.
    ax : mpl_toolkits.mplot3d.Axes3D, optional
        Axes to draw on. If omitted a new figure is created and shown.
    show_normals : bool, optional
        Draw the vertex normals as short arrows. Default: False
    """
    if ax is None:
        fig = plt.figure(figsize=(12, 12), dpi=100)
        ax = fig.add_subplot(projection="3d")
        ax.view_init(azim=-120, elev=20)
        independent_plot = True
    else:
        independent_plot = False

    triangles = mesh.vertices[mesh.faces]  # shape: (K, 3, 3)
    poly = Poly3DCollection(
        triangles,
        facecolors="lightsteelblue",
        edgecolors="k",
        linewidths=0.25,
        alpha=0.75,
    )
    ax.add_collection3d(poly)

    if show_normals:
        v, n = mesh.vertices.T, mesh.normals.T
        ax.quiver(v[0], v[1], v[2], n[0], n[1], n[2], length=0.05, color="g", lw=0.5)

    ax.auto_scale_xyz(*mesh.vertices.T)
    _set_axes_equal(ax)

    if independent_plot:
        fig.tight_layout()
        plt.show()
    else:
        return (*ax.lines, *ax.collections)
