from topopt.TwoPointConstraint import TwoPointConstraint
from topopt.errors import InvalidConstraint


class LinkConstraint(TwoPointConstraint):
    """Elastic massless rod between two particles.

    The rest length is the endpoint distance at construction. Each call to
    relax() removes ``stiffness`` of the length error, half from each end.
    Pruning switches the link off for good via deactivate().
    """
    def __init__(self, particles, i1, i2, stiffness=0.5):
        super().__init__(particles, i1, i2)
        stiffness = float(stiffness)
        if not 0.0 < stiffness <= 1.0:
            raise InvalidConstraint(f"LinkConstraint: stiffness {stiffness} is outside (0, 1]")
        self.stiffness = stiffness
        self.rest_length = self._measure_rest_length()
        self._active = True

    def _measure_rest_length(self):
        length = self.current_length
        if length <= 0.0:
            raise InvalidConstraint(f"LinkConstraint: particles {self.i1} and {self.i2} coincide")
        return length

    @property
    def active(self):
        return self._active

    def deactivate(self):
        self._active = False

    @property
    def strain(self):
        return abs(self.current_length - self.rest_length) / self.rest_length

    def reset_rest_length(self):
        self.rest_length = self._measure_rest_length()

    def relax(self):
        if not self._active:
            return

        p1 = self.p1
        p2 = self.p2
        error = self.rest_length - self.current_length
        offset = self.direction * (error * 0.5 * self.stiffness)

        p1.pos = p1.pos - offset
        p2.pos = p2.pos + offset

        # anchored particles take no correction
        if p1.fixed:
            p1.pos = p1.old_pos
        if p2.fixed:
            p2.pos = p2.old_pos

    def to_dict(self):
        return {
            'i1': self.i1,
            'i2': self.i2,
            'p1': self.p1.pos.to_tuple(),
            'p2': self.p2.pos.to_tuple(),
            'active': self._active,
            'strain': self.strain,
            'rest_length': self.rest_length
        }
