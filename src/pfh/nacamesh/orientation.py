"""Coordinate conventions for exported meshes."""

import numpy as np


__all__ = [
    "Z_FORWARD_DCM",
    "z_forward",
    "z_backward",
]


def __dir__():
    return __all__


# fmt: off
Z_FORWARD_DCM = np.array(
    [[ 0, 0, 1],  # noqa: 201, 241
     [ 0, 1, 0],  # noqa: 201, 241
     [-1, 0, 0]],  # noqa: 201, 241
    dtype=float,
)
# fmt: on
Z_FORWARD_DCM.setflags(write=False)


def z_forward(xyz):
    """
    Rotate vectors so "forward" is +z and "up" is +y.

    The airfoil is generated with the chord along +x, so the leading edge
    points along -x. A +90 degree rotation about the y-axis maps each
    `(x, y, z)` to `(z, y, -x)`, which points the leading edge along +z. The
    components are permuted directly, so the result is exactly
    `Z_FORWARD_DCM @ xyz` with no rounding.

    Parameters
    ----------
    xyz : array_like of float, shape (...,3)
        Points or direction vectors.

    Returns
    -------
    ndarray of float, shape (...,3)
    """
    xyz = np.asarray(xyz, dtype=float)
    if xyz.shape[-1] != 3:
        raise ValueError("The last dimension of `xyz` must be 3")
    return np.stack((xyz[..., 2], xyz[..., 1], -xyz[..., 0]), axis=-1)


def z_backward(xyz):
    """Undo `z_forward`, mapping each `(x, y, z)` to `(-z, y, x)`."""
    xyz = np.asarray(xyz, dtype=float)
    if xyz.shape[-1] != 3:
        raise ValueError("The last dimension of `xyz` must be 3")
    return np.stack((-xyz[..., 2], xyz[..., 1], xyz[..., 0]), axis=-1)
