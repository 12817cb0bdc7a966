"""Mathematical utility functions."""

import numpy as np
from numba import float64, guvectorize


__all__ = [
    "tangent_to_normal",
]


def __dir__():
    return __all__


@guvectorize(
    [(float64[:], float64[:])],
    "(n)->(n)",
    nopython=True,
    cache=True,
)
def tangent_to_normal(tangent, result):
    """Rotate 2d tangent vectors by +90 degrees and normalize them.

    A tangent `(tx, ty)` becomes the unit normal `(-ty, tx)`, which lies to
    the left of the direction of travel. Zero-length tangents produce the
    zero vector so the caller can detect them and pick a fallback.

    This vectorized version supports automatic broadcasting. The only
    requirement is that the last dimension of `tangent` is 2.

    Parameters
    ----------
    tangent : array_like
        Tangent vector components

    Returns
    -------
    normal : ndarray
        Unit normal vector(s), or zeros where the tangent has no length
    """
    if tangent.shape[-1] != 2:
        raise ValueError("All inputs must be 2-vectors")
    tx, ty = tangent
    norm = np.sqrt(tx * tx + ty * ty)
    if norm > 0:
        result[0] = -ty / norm
        result[1] = tx / norm
    else:
        result[0] = 0.0
        result[1] = 0.0
