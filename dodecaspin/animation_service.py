import asyncio
import importlib
import os
import random

from dodecaspin.state import state
from dodecaspin.logger import log, log_exception

ANIMATIONS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "animations")

def get_animation_list():
    files = os.listdir(ANIMATIONS_DIR)
    # exclude shared helpers
    exclude = {"__init__.py", "utils.py", "wireframe_3d.py"}
    anims = []
    for f in files:
        if f.endswith(".py") and f not in exclude:
            anims.append(f[:-3])  # remove .py extension
    return sorted(anims)

ANIMATION_LIST = get_animation_list()

async def run_named_animation(graphics, gu, animation_name, max_runtime_s):
    # run an animation for up to max_runtime_s seconds (0 or None = no limit), interruptible
    # Returns True if the animation ran to completion or timed out, False on load failure or error
    state.animation_active = True
    state.current_animation = animation_name
    state.interrupt_event.clear()

    module_path = f"dodecaspin.animations.{animation_name}"
    log(f"Loading animation: {animation_name}", "INFO")

    try:
        mod = importlib.import_module(module_path)
        anim_func = getattr(mod, "run")
    except (ImportError, AttributeError, ValueError) as e:
        log(f"Failed to load animation {animation_name}: {e}", "ERROR")
        state.animation_active = False
        state.current_animation = None
        return False

    timeout = max_runtime_s if max_runtime_s else None
    success = True
    task = asyncio.create_task(anim_func(graphics, gu, state, state.interrupt_event))
    try:
        await asyncio.wait_for(task, timeout=timeout)
    except asyncio.TimeoutError:
        log(f"Animation {animation_name} ended after {max_runtime_s}s", "INFO", uptime=True)
    except Exception as e:
        log_exception(f"Animation {animation_name} error", e)
        success = False
    finally:
        state.animation_active = False
        state.current_animation = None
        state.interrupt_event.set()

    return success

async def run_random_animation(graphics, gu, max_runtime_s):
    animation_name = random.choice(ANIMATION_LIST)
    return await run_named_animation(graphics, gu, animation_name, max_runtime_s)

def interrupt_animation():
    # signal a currently-running animation to stop
    state.interrupt_event.set()
