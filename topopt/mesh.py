import logging
import math
from collections import namedtuple

from topopt.LinkConstraint import LinkConstraint
from topopt.Particle import Particle
from topopt.Vec2 import Vec2

logger = logging.getLogger(__name__)

Mesh = namedtuple("Mesh", ["particles", "constraints", "columns", "rows"])


def round_half_up(value):
    return int(math.floor(value + 0.5))


def generate_block_mesh(resolution, width, height, stiffness=0.5, gravity=-9.8):
    """
    Mesh a width x height block centred at the origin.

    The two bottom corners are fixed, giving a bridge held at both ends.
    Every grid cell gets its four edges and both diagonals:

        tl _ tr
        |  x  |
        bl _ br

    :param resolution: Number of particle columns (at least 2).
    :param width: Block width.
    :param height: Block height.
    :param stiffness: Stiffness of every link, in (0, 1].
    :param gravity: Vertical acceleration of every particle.
    :return: Mesh(particles, constraints, columns, rows)
    """
    columns = int(resolution)
    if columns < 2:
        raise ValueError(f"resolution must be at least 2, got {resolution}")
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    rows = max(1, round_half_up(columns * (height / width)))

    hx = width / (columns - 1)
    # a single row has no vertical spacing; it sits on the bottom edge
    hy = height / (rows - 1) if rows > 1 else 0.0

    particles = []
    for iy in range(rows):
        for ix in range(columns):
            fixed = iy == 0 and (ix == 0 or ix == columns - 1)
            p = Particle(Vec2(hx * ix - width / 2, hy * iy - height / 2),
                         index=len(particles),
                         acceleration=Vec2(0.0, gravity),
                         fixed=fixed)
            particles.append(p)

    constraints = []
    for iy in range(rows - 1):
        for ix in range(columns - 1):
            tl = iy * columns + ix
            tr = tl + 1
            bl = tl + columns
            br = tr + columns
            for a, b in ((tl, tr), (tl, br), (tl, bl), (tr, br), (tr, bl), (bl, br)):
                constraints.append(LinkConstraint(particles, a, b, stiffness))

    logger.info("Generated %d x %d mesh: %d particles, %d links",
                columns, rows, len(particles), len(constraints))
    if not constraints:
        logger.warning("Mesh has a single row of particles and no links")
    return Mesh(particles, constraints, columns, rows)


def generate_mesh_from_config(config):
    return generate_block_mesh(config.resolution, config.width, config.height,
                               stiffness=config.stiffness, gravity=config.gravity)
