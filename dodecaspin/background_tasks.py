import asyncio
import time

from dodecaspin.state import state
from dodecaspin.logger import log
from dodecaspin.animation_service import interrupt_animation

async def window_monitor(gu, interval=0.1):
    # window close / escape ends the program
    while True:
        if not gu.running:
            log("Window closed", "INFO")
            state.quit_requested = True
            interrupt_animation()
            return
        await asyncio.sleep(interval)

async def debug_monitor(interval=5):
    last_frames = state.frames_rendered
    last_time = time.monotonic()
    while True:
        await asyncio.sleep(interval)
        now = time.monotonic()
        frames = state.frames_rendered
        fps = (frames - last_frames) / (now - last_time) if now > last_time else 0.0
        last_frames, last_time = frames, now
        log(
            f"State: anim={state.current_animation}, active={state.animation_active}, frames={frames}, fps={fps:.1f}",
            "DEBUG"
        )
