import asyncio

class State:
    def __init__(self):
        self.animation_active = False
        self.current_animation = None
        self.frames_rendered = 0
        self.quit_requested = False
        self.interrupt_event = asyncio.Event()
        self.max_iterations = -1

state = State()
