import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

class GraphicsSim:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.surface = pygame.Surface((width, height))
        self.current_pen = (255, 255, 255)
    def create_pen(self, r, g, b):
        return (int(r), int(g), int(b))
    def set_pen(self, pen):
        self.current_pen = pen
    def clear(self):
        self.surface.fill(self.current_pen)
    def get_bounds(self):
        return (self.width, self.height)

    def line(self, x1, y1, x2, y2, thickness=1):
        """Draw a line segment; fractional widths round to whole pixels."""
        width = max(1, int(round(thickness)))
        if width == 1:
            pygame.draw.aaline(self.surface, self.current_pen, (x1, y1), (x2, y2))
        else:
            pygame.draw.line(self.surface, self.current_pen, (x1, y1), (x2, y2), width)

class GUISim:
    def __init__(self, graphics, fps=60, title="Color Coded"):
        self.graphics = graphics
        self.fps = fps
        pygame.init()
        self.screen = pygame.display.set_mode(graphics.get_bounds())
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
    def update(self, graphics):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
        self.screen.blit(graphics.surface, (0, 0))
        pygame.display.flip()
        self.clock.tick(self.fps)
    def clear_display(self):
        self.graphics.clear()
        self.update(self.graphics)
    def close(self):
        pygame.quit()
