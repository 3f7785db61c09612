from topopt.Vec2 import Vec2


class Particle:
    def __init__(self, pos, index=None, acceleration=None, fixed=False):
        self.pos = pos if isinstance(pos, Vec2) else Vec2(pos[0], pos[1])
        # zero initial velocity
        self.old_pos = self.pos
        if acceleration is None:
            acceleration = Vec2(0.0, 0.0)
        self.acceleration = acceleration if isinstance(acceleration, Vec2) else Vec2(acceleration[0], acceleration[1])
        self.fixed = bool(fixed)
        self.index = index

    def integrate(self, dt):
        # Verlet: pos = 2*pos - old_pos + a*dt^2
        current = self.pos
        new_pos = current * 2.0 - self.old_pos + self.acceleration * (dt * dt)
        if self.fixed:
            new_pos = self.old_pos
        self.old_pos = current
        self.pos = new_pos

    def contain_to_bounds(self, minv, maxv):
        # anchors stay put even outside the box
        if self.fixed:
            return
        # old_pos is left alone, so a clamped particle bounces back on the next step
        self.pos = self.pos.clamp(minv, maxv)

    def velocity(self, dt):
        return (self.pos - self.old_pos) / dt

    def __repr__(self):
        return f"Particle(index={self.index}, pos=({self.pos.x:.4g}, {self.pos.y:.4g}), fixed={self.fixed})"

    def __str__(self):
        return self.__repr__()

    def to_dict(self):
        return {
            'index': self.index,
            'pos': self.pos.to_tuple(),
            'old_pos': self.old_pos.to_tuple(),
            'fixed': self.fixed
        }
