"""Index arithmetic for the vertex ring of a lofted airfoil."""

from __future__ import annotations


__all__ = ["VertexLayout"]


def __dir__():
    return __all__


class VertexLayout:
    """
    The arrangement of the `4n` vertices of an airfoil prism.

    Vertices are stored as four consecutive runs of `n` stations each: the
    top surface of the front cap (`z = -1`), the bottom surface of the front
    cap, the top surface of the back cap (`z = +1`), and the bottom surface
    of the back cap. The accessors accept integers or integer arrays.

    Parameters
    ----------
    n : integer
        The number of chord stations.
    """

    def __init__(self, n: int) -> None:
        self.n = n

    def __len__(self) -> int:
        return 4 * self.n

    def __repr__(self) -> str:
        return f"VertexLayout(n={self.n})"

    def top_front(self, i):
        return i

    def bottom_front(self, i):
        return self.n + i

    def top_back(self, i):
        return 2 * self.n + i

    def bottom_back(self, i):
        return 3 * self.n + i

    @property
    def front(self) -> slice:
        """Both surfaces of the front cap."""
        return slice(0, 2 * self.n)

    @property
    def back(self) -> slice:
        """Both surfaces of the back cap, in the same order as `front`."""
        return slice(2 * self.n, 4 * self.n)
