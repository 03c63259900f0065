import pytest

from dodecaspin.state import State


class FakeGraphics:
    """Records draw calls instead of rasterising them."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.current_pen = None
        self.clears = []
        self.lines = []

    def create_pen(self, r, g, b):
        return (r, g, b)

    def set_pen(self, pen):
        self.current_pen = pen

    def clear(self):
        self.clears.append(self.current_pen)
        self.lines = []

    def get_bounds(self):
        return (self.width, self.height)

    def line(self, x1, y1, x2, y2, thickness=1):
        self.lines.append(((x1, y1), (x2, y2), thickness, self.current_pen))


class FakeGU:
    def __init__(self, stop_after=None, event=None):
        self.frames = 0
        self.running = True
        self.stop_after = stop_after
        self.event = event

    def update(self, graphics):
        self.frames += 1
        if self.stop_after is not None and self.frames >= self.stop_after:
            self.event.set()

    def clear_display(self):
        pass

    def close(self):
        self.running = False


@pytest.fixture
def graphics():
    return FakeGraphics()


@pytest.fixture
def fresh_state(monkeypatch):
    import dodecaspin.animation_service as animation_service
    import dodecaspin.background_tasks as background_tasks
    import dodecaspin.main as main

    new_state = State()
    monkeypatch.setattr(animation_service, "state", new_state)
    monkeypatch.setattr(background_tasks, "state", new_state)
    monkeypatch.setattr(main, "state", new_state)
    return new_state
