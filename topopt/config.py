"""
Simulation options for the strain-pruning block.

Defaults follow a 25 mm wide, 6.25 mm tall bridge block in a 100 mm box,
with the mesh resolution and relaxation passes kept low enough for a
pure-Python solver to run at interactive rates.
"""
from dataclasses import dataclass, field, fields

from topopt.Vec2 import Vec2
from topopt.errors import ConfigError

BLOCK_WIDTH = 0.025
BOX_HALF_SIZE = 2 * BLOCK_WIDTH

# option names accepted by from_dict besides the field names themselves
_ALIASES = {
    'relaxationIterations': 'relaxation_iterations',
    'pruneThreshold': 'prune_threshold',
    'pruneInterval': 'prune_interval',
    'boundsMin': 'bounds_min',
    'boundsMax': 'bounds_max',
}


@dataclass
class SimulationConfig:
    resolution: int = 24
    width: float = BLOCK_WIDTH
    height: float = BLOCK_WIDTH * 0.25
    stiffness: float = 0.5
    gravity: float = -9.8
    timestep: float = 0.002
    relaxation_iterations: int = 40
    prune_threshold: float = 0.003
    prune_interval: int = 50
    bounds_min: Vec2 = field(default_factory=lambda: Vec2(-BOX_HALF_SIZE, -BOX_HALF_SIZE))
    bounds_max: Vec2 = field(default_factory=lambda: Vec2(BOX_HALF_SIZE, BOX_HALF_SIZE))

    def validate(self):
        if self.resolution < 2:
            raise ConfigError(f"resolution must be at least 2, got {self.resolution}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"width and height must be positive, got {self.width} x {self.height}")
        if not 0.0 < self.stiffness <= 1.0:
            raise ConfigError(f"stiffness must be in (0, 1], got {self.stiffness}")
        if self.timestep <= 0:
            raise ConfigError(f"timestep must be positive, got {self.timestep}")
        if self.relaxation_iterations < 0:
            raise ConfigError(f"relaxation_iterations must not be negative, got {self.relaxation_iterations}")
        if not 0.0 <= self.prune_threshold <= 1.0:
            raise ConfigError(f"prune_threshold must be in [0, 1], got {self.prune_threshold}")
        if self.prune_interval < 1:
            raise ConfigError(f"prune_interval must be at least 1, got {self.prune_interval}")
        if self.bounds_min.x > self.bounds_max.x or self.bounds_min.y > self.bounds_max.y:
            raise ConfigError(f"bounds_min {self.bounds_min} is not below bounds_max {self.bounds_max}")
        return self

    @classmethod
    def from_dict(cls, options):
        """Build a validated config from a dict of option names to values.

        Both the snake_case field names and the camelCase option names are
        recognized. Box corners may be given as Vec2 or as (x, y) pairs.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"unknown option: {key!r}")
            if name in ('bounds_min', 'bounds_max') and not isinstance(value, Vec2):
                value = Vec2(value[0], value[1])
            kwargs[name] = value
        return cls(**kwargs).validate()

    def to_dict(self):
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d['bounds_min'] = self.bounds_min.to_tuple()
        d['bounds_max'] = self.bounds_max.to_tuple()
        return d
