import asyncio

from dodecaspin.animations.utils import hsv_to_rgb, to_pen
from dodecaspin.hardware import BLACK
from dodecaspin.wireframes.dodecahedron import VERTICES, EDGES

# per-frame rotation increments, distinct so the axes look independent
ANGLE_STEP_X = 0.01
ANGLE_STEP_Y = 0.015
ANGLE_STEP_Z = 0.005

HUE_STEP = 0.002
LINE_WIDTH = 1.5

class SpinState:
    def __init__(self, hue=0.0):
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0
        self.hue = hue

    def advance_rotation(self):
        # angles grow without bound; sin/cos are periodic
        self.angle_x += ANGLE_STEP_X
        self.angle_y += ANGLE_STEP_Y
        self.angle_z += ANGLE_STEP_Z

    def advance_hue(self):
        self.hue += HUE_STEP
        if self.hue >= 1.0:
            self.hue -= 1.0

def edge_color(hue, index, count):
    # spread the rainbow evenly along the edge list
    return hsv_to_rgb((hue + index / count) % 1.0, 1.0, 1.0)

def draw_frame(graphics, spin, vertices=VERTICES, edges=EDGES):
    graphics.set_pen(graphics.create_pen(*BLACK))
    graphics.clear()

    spin.advance_rotation()

    width, height = graphics.get_bounds()
    projected = [
        v.rotate_x(spin.angle_x).rotate_y(spin.angle_y).rotate_z(spin.angle_z).project(width, height)
        for v in vertices
    ]

    count = len(edges)
    for i, (a, b) in enumerate(edges):
        x1, y1 = projected[a]
        x2, y2 = projected[b]
        graphics.set_pen(to_pen(graphics, edge_color(spin.hue, i, count)))
        graphics.line(x1, y1, x2, y2, LINE_WIDTH)

    spin.advance_hue()
    return projected

async def run(graphics, gu, state, interrupt_event):
    # rainbow dodecahedron, spins until interrupted
    spin = SpinState()
    while not interrupt_event.is_set():
        draw_frame(graphics, spin)
        gu.update(graphics)
        state.frames_rendered += 1
        await asyncio.sleep(0)
