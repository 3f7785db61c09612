"""
Pytest configuration and shared fixtures.
"""

import pytest

from topopt.Particle import Particle
from topopt.Vec2 import Vec2


@pytest.fixture
def bridge_config():
    """Small sagging bridge: 8 x 2 particles under gravity."""
    from topopt.config import SimulationConfig
    return SimulationConfig(
        resolution=8,
        width=0.025,
        height=0.00625,
        stiffness=0.5,
        gravity=-9.8,
        timestep=0.002,
        relaxation_iterations=10,
        prune_threshold=0.2,
        prune_interval=5,
    ).validate()


@pytest.fixture
def bridge_solver(bridge_config):
    from topopt.solver import Solver
    return Solver.from_config(bridge_config)


@pytest.fixture
def big_box():
    return Vec2(-100.0, -100.0), Vec2(100.0, 100.0)


@pytest.fixture
def anchored_pair():
    """A fixed particle at the origin and a free one at (1, 0)."""
    return [Particle(Vec2(0.0, 0.0), index=0, fixed=True),
            Particle(Vec2(1.0, 0.0), index=1)]
