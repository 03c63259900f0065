#!/usr/bin/env python3

import argparse
import asyncio
import sys

from dodecaspin.config import config
from dodecaspin.logger import setup_logging, log, log_exception
from dodecaspin.state import state
from dodecaspin.hardware import create_hardware, BACKENDS, BLACK, RED
from dodecaspin.animation_service import run_random_animation, run_named_animation, get_animation_list
from dodecaspin.background_tasks import window_monitor, debug_monitor

# conveyer belt
def rotate_sequence(seq):
    item = seq.pop(0)
    seq.append(item)
    return item

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Rotating rainbow wireframe dodecahedron"
    )
    parser.add_argument("--config", help="Path to a JSON config file (default: ./config.json)")
    parser.add_argument("--backend", choices=BACKENDS, help="Drawing backend")
    parser.add_argument("--width", type=int, help="Surface width in pixels")
    parser.add_argument("--height", type=int, help="Surface height in pixels")
    parser.add_argument("--fps", type=int, help="Frame rate cap for the window backend")
    parser.add_argument(
        "--duration",
        type=float,
        help="Run for this many seconds, then exit"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)

def apply_args(args):
    if args.config:
        config.load(args.config)
    for key in ("backend", "width", "height", "fps"):
        value = getattr(args, key)
        if value is not None:
            config.set("display", key, value)
    if args.duration is not None:
        config.set("general", "max_runtime_s", args.duration)
        config.set("general", "max_iterations", 1)
    if args.debug:
        config.set("general", "debug", True)

async def main(graphics, gu):
    setup_logging(config.get("general", "debug", False))
    graphics.set_pen(graphics.create_pen(*BLACK))
    gu.clear_display()

    asyncio.create_task(window_monitor(gu))

    # debug mode task (regularly log frame counts)
    if config.get("general", "debug", False):
        asyncio.create_task(debug_monitor())

    sequence = list(config.get("general", "sequence", ["dodecahedron"]))
    animation_list = get_animation_list()
    state.max_iterations = config.get("general", "max_iterations", -1)
    max_runtime_s = config.get("general", "max_runtime_s", 0)

    if not any(job in ("*", "animation") or job in animation_list for job in sequence):
        log(f"No runnable jobs in sequence {sequence}", "ERROR")
        return

    while not state.quit_requested and state.max_iterations != 0:
        job = rotate_sequence(sequence)

        if job == "*" or job == "animation":
            await run_random_animation(graphics, gu, max_runtime_s)
        elif job in animation_list:
            await run_named_animation(graphics, gu, job, max_runtime_s)
        else:
            log(f"Unknown sequence job: {job}", "WARN")
            continue

        if state.max_iterations > 0:
            state.max_iterations -= 1

    log("Stopping", "INFO", uptime=True)

def cli(argv=None):
    apply_args(parse_args(argv))
    graphics, gu = create_hardware(config)
    try:
        asyncio.run(main(graphics, gu))
    except KeyboardInterrupt:
        log("Stopped by user.", "INFO")
    except Exception as e:
        log_exception("Fatal error", e)
        # try to paint the display red on crash
        try:
            graphics.set_pen(graphics.create_pen(*RED))
            graphics.clear()
            gu.update(graphics)
        except Exception:
            pass
        return 1
    finally:
        gu.close()
    return 0

if __name__ == "__main__":
    sys.exit(cli())
