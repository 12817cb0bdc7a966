"""Command-line entry point: generate an airfoil mesh and save it as OBJ."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from pfh.nacamesh import obj
from pfh.nacamesh.airfoil import Convention, Spacing
from pfh.nacamesh.config import MAX_RESOLUTION, MIN_RESOLUTION, AirfoilRequest
from pfh.nacamesh.exceptions import OutputError, UsageError, ValidationError
from pfh.nacamesh.mesh import build_mesh


__all__ = ["main"]


def __dir__():
    return __all__


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="nacamesh",
        description="Extrude a NACA 4-digit airfoil into a Wavefront OBJ mesh.",
    )
    parser.add_argument("naca", help="4 digit NACA code, such as 0012 or 2412")
    parser.add_argument(
        "resolution",
        help="number of stations along the chord "
        f"({MIN_RESOLUTION} to {MAX_RESOLUTION})",
    )
    parser.add_argument("output", help="path of the OBJ file to write")
    parser.add_argument(
        "--spacing",
        choices=[s.value for s in Spacing],
        default=Spacing.QUADRATIC.value,
        help="distribution of the chord stations (default: %(default)s)",
    )
    parser.add_argument(
        "--convention",
        choices=[c.value for c in Convention],
        default=Convention.PERPENDICULAR.value,
        help="apply the thickness perpendicular to the camber line or "
        "vertically (default: %(default)s)",
    )
    parser.add_argument(
        "--no-z-forward",
        dest="z_forward",
        action="store_false",
        help="keep the chord along +x instead of pointing the leading edge to +z",
    )
    parser.add_argument(
        "--symmetric-only",
        action="store_true",
        help="reject codes with camber",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every pipeline stage",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level}</level>: {message}",
    )
    logger.enable("pfh.nacamesh")


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line tool.

    Parameters
    ----------
    argv : list of string, optional
        The arguments, excluding the program name. Default: `sys.argv[1:]`

    Returns
    -------
    integer
        The process exit status: 0 on success, 1 if an input was rejected or
        the output could not be written, 2 for a malformed command line.
    """
    parser = _create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2

    _setup_logging(args.verbose)

    try:
        request = AirfoilRequest.from_strings(
            args.naca,
            args.resolution,
            spacing=args.spacing,
            convention=args.convention,
            z_forward=args.z_forward,
            symmetric_only=args.symmetric_only,
        )
    except ValidationError as e:
        logger.error("{}", e)
        return 1

    mesh = build_mesh(request)

    try:
        obj.write_obj(mesh, args.output)
    except OutputError as e:
        logger.error("{}", e)
        return 1

    return 0
