"""
Geometry of NACA 4-digit wing sections sampled at discrete chord stations.

The profile generator evaluates the NACA half-thickness polynomial, the mean
camber line, and the surface offsets from the camber line at `n` stations
along the unit chord. The resulting `Profile` is the input to the mesh
builder, which lofts it into a prism.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from loguru import logger

from pfh.nacamesh.exceptions import ValidationError


__all__ = [
    "Spacing",
    "Convention",
    "NACA",
    "Profile",
    "chord_stations",
    "generate_profile",
]


def __dir__():
    return __all__


_CODE_PATTERN = re.compile(r"[0-9]{4}")


class Spacing(str, enum.Enum):
    """How the chord stations are distributed between `x = 0` and `x = 1`."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"  # Front-loaded: concentrates stations near the LE
    COSINE = "cosine"  # Clusters stations at both the LE and the TE


class Convention(str, enum.Enum):
    """How the half-thickness is applied to the mean camber line."""

    PERPENDICULAR = "perpendicular"
    VERTICAL = "vertical"


class NACA:
    """
    A NACA 4-digit airfoil code.

    Parameters
    ----------
    code : string, integer, or sequence of integers
        The 4-digit code. Strings must be exactly four ASCII digits, such as
        "0012". Integers must be between 0 and 9999; leading zeros are
        implicitly added, so 12 becomes "0012". Sequences must contain four
        integers between 0 and 9.

    Attributes
    ----------
    digits : tuple of int
        The four digits of the code.
    m : float
        The maximum camber, as a fraction of the chord.
    p : float
        The chordwise position of the maximum camber, as a fraction of the
        chord.
    tcr : float
        The thickness-to-chord ratio.
    """

    def __init__(self, code: int | str | Sequence[int]) -> None:
        if isinstance(code, NACA):
            digits = code.digits
        elif isinstance(code, str):
            if not _CODE_PATTERN.fullmatch(code):
                raise ValidationError("Invalid NACA", {"code": code})
            digits = tuple(int(c) for c in code)
        elif isinstance(code, (int, np.integer)) and not isinstance(code, bool):
            if code < 0 or code > 9999:
                raise ValidationError(
                    "Invalid NACA: must be between 0 and 9999",
                    {"code": int(code)},
                )
            digits = tuple(int(c) for c in f"{int(code):04d}")
        else:
            digits = tuple(code)
            if len(digits) != 4 or not all(
                isinstance(d, (int, np.integer)) and 0 <= d <= 9 for d in digits
            ):
                raise ValidationError("Invalid NACA", {"code": digits})
            digits = tuple(int(d) for d in digits)

        self.digits = digits
        self.m = digits[0] / 100  # Maximum camber
        self.p = digits[1] / 10  # Location of max camber
        self.tcr = (digits[2] * 10 + digits[3]) / 100  # Thickness-to-chord ratio

    def __repr__(self) -> str:
        return f"NACA('{self}')"

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)

    def __eq__(self, other):
        if not isinstance(other, NACA):
            return NotImplemented
        return self.digits == other.digits

    def __hash__(self):
        return hash(self.digits)

    @property
    def symmetric(self) -> bool:
        """Whether the code has neither camber nor a camber position."""
        return self.digits[0] == 0 and self.digits[1] == 0

    def thickness(self, x):
        """
        Compute the half-thickness of the airfoil.

        The trailing edge coefficient is the closed-TE variant, so the
        polynomial is (nearly) zero at `x = 1`.

        Parameters
        ----------
        x : array_like of float, shape (N,)
            Position on the chord line, where `0 <= x <= 1`

        Returns
        -------
        array of float, shape (N,)
        """
        x = _check_chord(x)
        a0, a1, a2, a3, a4 = 0.2969, 0.1260, 0.3516, 0.2843, 0.1036
        return (
            5
            * self.tcr
            * (a0 * np.sqrt(x) - a1 * x - a2 * x**2 + a3 * x**3 - a4 * x**4)
        )

    def camber(self, x):
        """
        Compute the y-coordinate of points on the mean camber line.

        Parameters
        ----------
        x : array_like of float, shape (N,)
            Position on the chord line, where `0 <= x <= 1`

        Returns
        -------
        y : array of float, shape (N,)
            The y-coordinates of the mean camber line.
        """
        x = _check_chord(x)
        m, p = self.m, self.p
        y = np.zeros(x.shape)
        if m == 0:
            return y

        f = self._forward(x)  # Filter for the two cases, `x <= p` and `x > p`
        if p > 0:
            y[f] = (m / p**2) * (2 * p * x[f] - x[f] ** 2)
        y[~f] = (m / (1 - p) ** 2) * ((1 - 2 * p) + 2 * p * x[~f] - x[~f] ** 2)
        return y

    def theta(self, x):
        """
        Compute the angle of the mean camber line.

        Parameters
        ----------
        x : array_like of float, shape (N,)
            Position on the chord line, where `0 <= x <= 1`

        Returns
        -------
        array of float, shape (N,) [radians]
        """
        x = _check_chord(x)
        m, p = self.m, self.p
        dyc = 2 * m * (p - x)  # Common factors
        f = self._forward(x)
        if p > 0:
            dyc[f] /= p**2
        dyc[~f] /= (1 - p) ** 2
        return np.arctan(dyc)

    def _forward(self, x):
        # With `p == 0` the forward branch degenerates to the single point
        # `x = 0`, which the aft branch covers without dividing by `p`.
        if self.p == 0:
            return np.zeros(x.shape, dtype=bool)
        return x <= self.p


def _check_chord(x):
    x = np.asarray(x, dtype=float)
    if np.any(x < 0) or np.any(x > 1):
        raise ValueError("x must be between 0 and 1")
    return x


def chord_stations(n: int, spacing: Spacing | str = Spacing.QUADRATIC):
    """
    Compute the chordwise parameter of every station.

    Parameters
    ----------
    n : integer
        The number of stations, including both endpoints.
    spacing : Spacing, optional
        The distribution of the stations. Default: quadratic.

    Returns
    -------
    x : array of float, shape (n,)
        Monotonically increasing positions with `x[0] == 0` and `x[-1] == 1`.
    """
    spacing = Spacing(spacing)
    u = np.linspace(0, 1, n)
    if spacing is Spacing.LINEAR:
        return u
    elif spacing is Spacing.QUADRATIC:
        return u**2
    elif spacing is Spacing.COSINE:
        return (1 - np.cos(np.pi * u)) / 2
    raise RuntimeError(f"Invalid spacing '{spacing}'")


@dataclass(frozen=True)
class Profile:
    """
    An airfoil sampled at discrete chord stations.

    All arrays are read-only and share the station index along their first
    dimension.

    Attributes
    ----------
    code : NACA
        The airfoil that was sampled.
    x : array of float, shape (n,)
        Chordwise position of each station.
    thickness : array of float, shape (n,)
        Half-thickness at each station. Zero at both endpoints.
    camber : array of float, shape (n,)
        Height of the mean camber line at each station. Zero at both
        endpoints.
    offset : array of float, shape (n, 2)
        Displacement of the upper surface from the mean camber line. The
        lower surface is displaced by the negated vector.
    """

    code: NACA
    x: np.ndarray
    thickness: np.ndarray
    camber: np.ndarray
    offset: np.ndarray

    def __post_init__(self):
        for name in ("x", "thickness", "camber", "offset"):
            getattr(self, name).setflags(write=False)

    @property
    def resolution(self) -> int:
        return len(self.x)

    def upper(self):
        """Return the xy-coordinates of the upper surface, shape (n, 2)."""
        return np.c_[self.x + self.offset[:, 0], self.camber + self.offset[:, 1]]

    def lower(self):
        """Return the xy-coordinates of the lower surface, shape (n, 2)."""
        return np.c_[self.x - self.offset[:, 0], self.camber - self.offset[:, 1]]


def generate_profile(request) -> Profile:
    """
    Sample the thickness, camber, and surface offsets of an airfoil.

    Symmetric codes skip the camber and slope computations entirely; their
    offsets are the half-thickness measured straight up from the chord.

    Parameters
    ----------
    request : AirfoilRequest
        Supplies the NACA code, the resolution, the station spacing, and the
        thickness convention.

    Returns
    -------
    Profile
    """
    code = request.code
    n = request.resolution
    x = chord_stations(n, request.spacing)

    t = code.thickness(x)
    t[[0, -1]] = 0  # Closed leading and trailing edges

    if code.symmetric:
        camber = np.zeros(n)
        offset = np.c_[np.zeros(n), t]
    else:
        camber = code.camber(x)
        camber[[0, -1]] = 0
        if Convention(request.convention) is Convention.PERPENDICULAR:
            theta = code.theta(x)
            offset = np.c_[-t * np.sin(theta), t * np.cos(theta)]
        else:  # XFOIL style
            offset = np.c_[np.zeros(n), t]

    logger.debug("Generated profile for NACA {} with {} stations", code, n)
    return Profile(code, x, t, camber, offset)
