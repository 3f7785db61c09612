import math

import pygame

import constants
from topopt.Vec2 import Vec2
from topopt.errors import DegenerateStrainRange
from topopt.strain import normalize_strain


class ColorMap:
    """Blue -> green -> red ramp for values in [0, 1]."""
    def __init__(self, sharp=10, power=2):
        self.sharp = sharp
        self.power = power
        self.ff = 255

    def gaussian(self, value, offset):
        return int(self.ff / (1 + (abs(value - offset) ** self.power) * self.sharp))

    def red(self, value):
        return self.gaussian(value, 1.0)

    def green(self, value):
        return self.gaussian(value, 0.5)

    def blue(self, value):
        return self.gaussian(value, 0.0)

    def rgb(self, value):
        return (self.red(value), self.green(value), self.blue(value))


def cartesian_to_screen(pos, scale=constants.DRAWING_SCALE, width=constants.WIDTH, height=constants.HEIGHT):
    # screen y grows downwards
    return Vec2(scale * pos.x + width / 2, height / 2 - scale * pos.y)


def screen_to_cartesian(pos, scale=constants.DRAWING_SCALE, width=constants.WIDTH, height=constants.HEIGHT):
    return Vec2((pos.x - width / 2) / scale, (height / 2 - pos.y) / scale)


class Renderer:
    def __init__(self, screen, scale=constants.DRAWING_SCALE):
        self.screen = screen
        self.scale = scale
        self.cmap = ColorMap()
        self.font = pygame.font.Font(None, 28)

    def _to_screen(self, pos):
        sp = cartesian_to_screen(pos, self.scale, self.screen.get_width(), self.screen.get_height())
        return (int(sp.x), int(sp.y))

    def link_color(self, strain, strain_range):
        try:
            value = normalize_strain(strain, strain_range)
        except DegenerateStrainRange:
            return constants.GREY
        return self.cmap.rgb(math.sqrt(max(0.0, value)))

    def draw_box(self, minv, maxv):
        tl = self._to_screen(Vec2(minv.x, maxv.y))
        br = self._to_screen(Vec2(maxv.x, minv.y))
        pygame.draw.rect(self.screen, constants.LIGHT_GREY,
                         pygame.Rect(tl[0], tl[1], br[0] - tl[0], br[1] - tl[1]), 1)

    def draw_solver(self, solver):
        strain_range = solver.strain_range()
        for c in solver.constraints:
            if not c.active:
                continue
            pygame.draw.line(self.screen, self.link_color(c.strain, strain_range),
                             self._to_screen(c.p1.pos), self._to_screen(c.p2.pos),
                             constants.LINK_WIDTH)

        for p in solver.particles:
            if p.fixed:
                center = self._to_screen(p.pos)
                pygame.draw.circle(self.screen, constants.BLACK, center, constants.FIXED_POINT_RADIUS)
                pygame.draw.circle(self.screen, constants.LIGHT_GREY, center, constants.FIXED_POINT_RADIUS, 1)

    def draw_status(self, text, paused=False):
        surf = self.font.render(text, True, constants.BLACK)
        self.screen.blit(surf, (10, self.screen.get_height() - 30))
        if paused:
            pause_text = self.font.render("PAUSED", True, constants.BLACK)
            self.screen.blit(pause_text, (self.screen.get_width() - pause_text.get_width() - 10, 10))
