from collections import namedtuple

from topopt.errors import DegenerateStrainRange


class StrainRange(namedtuple("StrainRange", ["min", "max"])):
    __slots__ = ()

    @property
    def span(self):
        return self.max - self.min

    @property
    def is_degenerate(self):
        return self.span == 0.0


def scan_strain_range(constraints):
    """Min and max strain over the active constraints, or None if none are active."""
    lo = hi = None
    for c in constraints:
        if not c.active:
            continue
        s = c.strain
        if lo is None or s < lo:
            lo = s
        if hi is None or s > hi:
            hi = s
    if lo is None:
        return None
    return StrainRange(lo, hi)


def normalize_strain(strain, strain_range):
    if strain_range is None:
        raise DegenerateStrainRange("no active constraints")
    if strain_range.is_degenerate:
        raise DegenerateStrainRange(f"all active constraints have strain {strain_range.min}")
    return (strain - strain_range.min) / strain_range.span
