import logging

from topopt.errors import DegenerateStrainRange
from topopt.mesh import generate_mesh_from_config
from topopt.strain import normalize_strain, scan_strain_range

logger = logging.getLogger(__name__)


class Solver:
    def __init__(self, particles=None, constraints=None, timestep=0.01, iterations=20):
        self.timestep = timestep
        self.iterations = iterations

        # the solver takes ownership of the list the links index into
        self.particles = particles if particles is not None else []
        for i, p in enumerate(self.particles):
            self._check_index(p, i)
        self.constraints = []
        for c in constraints or ():
            self.add_constraint(c)

    @classmethod
    def from_config(cls, config, settle=False):
        """Generate the block mesh described by ``config`` and wrap it in a solver.

        With ``settle`` the solver takes one step inside the configured box
        before it is returned.
        """
        mesh = generate_mesh_from_config(config)
        solver = cls(mesh.particles, mesh.constraints,
                     timestep=config.timestep, iterations=config.relaxation_iterations)
        if settle:
            solver.step(config.bounds_min, config.bounds_max)
        return solver

    @staticmethod
    def _check_index(particle, slot):
        # a particle's index is its slot in self.particles
        if particle.index is None:
            particle.index = slot
        elif particle.index != slot:
            raise ValueError(f"particle index {particle.index} does not match slot {slot}")

    def add_particle(self, particle):
        self._check_index(particle, len(self.particles))
        self.particles.append(particle)

    def add_constraint(self, constraint):
        if constraint.particles is not self.particles:
            raise ValueError(f"{constraint!r} indexes a particle list this solver does not own")
        self.constraints.append(constraint)

    def step(self, minv, maxv):
        """
        Advance the simulation by one timestep.

        Integration first, then ``iterations`` relaxation passes over the
        links in insertion order, then containment in the [minv, maxv] box.
        Each relax() call moves particles that later links read, so the
        pass order is part of the result.
        """
        for p in self.particles:
            p.integrate(self.timestep)

        for _ in range(self.iterations):
            for c in self.constraints:
                c.relax()

        for p in self.particles:
            p.contain_to_bounds(minv, maxv)

    def strain_range(self):
        return scan_strain_range(self.constraints)

    def normalized_strain(self, constraint, strain_range=None):
        if strain_range is None:
            strain_range = self.strain_range()
        return normalize_strain(constraint.strain, strain_range)

    def active_count(self):
        return sum(1 for c in self.constraints if c.active)

    def total_count(self):
        return len(self.constraints)

    def mass_loss(self):
        """Fraction of links removed by pruning."""
        total = self.total_count()
        if total == 0:
            return 0.0
        return (total - self.active_count()) / total

    def prune_low_strain(self, threshold):
        """
        Deactivate every active link whose normalized strain is <= threshold.

        Returns the number of links deactivated by this call. When the active
        links show no strain variation (or none are left) nothing is pruned.
        """
        strain_range = self.strain_range()
        pruned = 0
        try:
            for c in self.constraints:
                if c.active and normalize_strain(c.strain, strain_range) <= threshold:
                    c.deactivate()
                    pruned += 1
        except DegenerateStrainRange as exc:
            logger.debug("Skipping prune: %s", exc)
            return 0

        logger.info("Pruned %d links, %d of %d active, mass loss %.0f %%",
                    pruned, self.active_count(), self.total_count(), 100 * self.mass_loss())
        return pruned

    def particle_states(self):
        return [p.to_dict() for p in self.particles]

    def constraint_states(self):
        return [c.to_dict() for c in self.constraints]

    def __repr__(self):
        return (f"<{self.__class__.__name__} particles={len(self.particles)} "
                f"links={self.active_count()}/{self.total_count()} iterations={self.iterations}>")
