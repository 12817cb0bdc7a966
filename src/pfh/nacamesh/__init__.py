from loguru import logger

from pfh.nacamesh import (
    airfoil,
    config,
    exceptions,
    layout,
    mesh,
    normals,
    obj,
    orientation,
    util,
)
from pfh.nacamesh._version import version as __version__
from pfh.nacamesh.airfoil import NACA, Convention, Profile, Spacing, generate_profile
from pfh.nacamesh.config import AirfoilRequest
from pfh.nacamesh.mesh import AirfoilMesh, build_mesh


logger.disable("pfh.nacamesh")
