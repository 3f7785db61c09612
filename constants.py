# --- Window ---
WIDTH, HEIGHT = 800, 600
FPS = 60

# pixels per metre of the simulated box
DRAWING_SCALE = 6000

LINK_WIDTH = 4
FIXED_POINT_RADIUS = 5

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (85, 85, 85)
LIGHT_GREY = (204, 204, 204)
