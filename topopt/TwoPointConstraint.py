from topopt.errors import InvalidConstraint


class TwoPointConstraint:
    """Base class for constraints between two particles of a shared list.

    The list is owned by the solver; the constraint only keeps the list and
    the two indices into it.
    """
    def __init__(self, particles, i1, i2):
        if particles is None:
            raise InvalidConstraint(f"{self.__class__.__name__}: particle list is missing")
        for name, idx in (("i1", i1), ("i2", i2)):
            if idx is None:
                raise InvalidConstraint(f"{self.__class__.__name__}: endpoint {name} is missing")
            if not 0 <= idx < len(particles):
                raise InvalidConstraint(f"{self.__class__.__name__}: endpoint {name}={idx} is not in the particle list")
        if i1 == i2:
            raise InvalidConstraint(f"{self.__class__.__name__}: both endpoints are particle {i1}")
        self.particles = particles
        self.i1 = i1
        self.i2 = i2

    @property
    def p1(self):
        return self.particles[self.i1]

    @property
    def p2(self):
        return self.particles[self.i2]

    @property
    def delta(self):
        return self.p2.pos - self.p1.pos

    @property
    def current_length(self):
        return self.delta.magnitude()

    @property
    def direction(self):
        return self.delta.normalize()

    def contains_particle(self, index):
        return self.i1 == index or self.i2 == index

    def relax(self):
        """Apply one positional correction. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} i1={self.i1} i2={self.i2}>"

    def __str__(self):
        return self.__repr__()
