"""
Display-less drawing surface.
Keeps an RGB pixel buffer so frames can be inspected without a window.
"""

class HeadlessGraphics:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.buffer = [[(0, 0, 0) for _ in range(height)] for _ in range(width)]
        self.current_pen = (255, 255, 255)
    def create_pen(self, r, g, b):
        return (int(r), int(g), int(b))
    def set_pen(self, pen):
        self.current_pen = pen
    def pixel(self, x, y):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.buffer[x][y] = self.current_pen
    def clear(self):
        for x in range(self.width):
            for y in range(self.height):
                self.buffer[x][y] = self.current_pen
    def get_bounds(self):
        return (self.width, self.height)

    def line(self, x1, y1, x2, y2, thickness=1):
        """Draw a one pixel line using Bresenham's algorithm. Thickness is ignored."""
        x1, y1, x2, y2 = int(round(x1)), int(round(y1)), int(round(x2)), int(round(y2))
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy

        x, y = x1, y1
        while True:
            self.pixel(x, y)
            if x == x2 and y == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    def lit_pixels(self):
        return sum(1 for column in self.buffer for pen in column if pen != (0, 0, 0))

class HeadlessGU:
    def __init__(self, graphics):
        self.graphics = graphics
        self.frames = 0
        self.running = True
    def update(self, graphics):
        self.frames += 1
    def clear_display(self):
        self.graphics.clear()
        self.update(self.graphics)
    def close(self):
        self.running = False
