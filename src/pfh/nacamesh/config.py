"""The immutable request that drives the mesh generation pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

from pfh.nacamesh.airfoil import NACA, Convention, Spacing
from pfh.nacamesh.exceptions import ValidationError


__all__ = [
    "MIN_RESOLUTION",
    "MAX_RESOLUTION",
    "AirfoilRequest",
    "parse_resolution",
]


def __dir__():
    return __all__


MIN_RESOLUTION = 3
MAX_RESOLUTION = 1000

_RESOLUTION_PATTERN = re.compile(r"[0-9]+")


def parse_resolution(text: str) -> int:
    """Parse the number of chord stations from command-line text."""
    if not isinstance(text, str) or not _RESOLUTION_PATTERN.fullmatch(text):
        raise ValidationError("Invalid x resolution", {"resolution": text})
    return int(text, 10)


@dataclass(frozen=True)
class AirfoilRequest:
    """
    Everything needed to generate one airfoil mesh.

    Parameters
    ----------
    code : NACA, string, or integer
        The NACA 4-digit code.
    resolution : integer
        The number of stations along the chord, `3 <= resolution <= 1000`.
    spacing : Spacing, optional
        The chordwise station distribution. Default: quadratic (front-loaded).
    convention : Convention, optional
        How the half-thickness is applied to the camber line. Default:
        perpendicular.
    z_forward : bool, optional
        Rotate the mesh so "forward" is +z and "up" is +y. Default: True.
    symmetric_only : bool, optional
        Reject cambered codes. Default: False.
    """

    code: NACA
    resolution: int
    spacing: Spacing = Spacing.QUADRATIC
    convention: Convention = Convention.PERPENDICULAR
    z_forward: bool = True
    symmetric_only: bool = False

    def __post_init__(self):
        # Coerce in place; the instance is frozen once construction finishes
        object.__setattr__(self, "code", NACA(self.code))
        try:
            object.__setattr__(self, "spacing", Spacing(self.spacing))
            object.__setattr__(self, "convention", Convention(self.convention))
        except ValueError as e:
            raise ValidationError(str(e)) from None

        n = self.resolution
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ValidationError("Invalid x resolution", {"resolution": n})
        object.__setattr__(self, "resolution", int(n))
        if n < MIN_RESOLUTION:
            raise ValidationError(
                f"x resolution must be at least {MIN_RESOLUTION}",
                {"resolution": int(n)},
            )
        elif n > MAX_RESOLUTION:
            raise ValidationError(
                f"x resolution may not be greater than {MAX_RESOLUTION}",
                {"resolution": int(n)},
            )

        if self.symmetric_only and not self.code.symmetric:
            raise ValidationError(
                "Only symmetric NACA are supported in symmetric-only mode",
                {"code": str(self.code)},
            )

    @property
    def symmetric(self) -> bool:
        return self.code.symmetric

    @classmethod
    def from_strings(cls, naca: str, resolution: str, **options) -> AirfoilRequest:
        """
        Build a request from raw command-line text.

        Parameters
        ----------
        naca : string
            Exactly four ASCII digits.
        resolution : string
            A base-10 integer.
        **options
            Forwarded to the constructor (`spacing`, `convention`, ...).
        """
        return cls(NACA(naca), parse_resolution(resolution), **options)
