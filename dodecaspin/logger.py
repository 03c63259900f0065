import time
import traceback
from datetime import datetime, timezone

_debug_enabled = False
_start_time = time.monotonic()

def setup_logging(debug_enabled):
    global _debug_enabled
    _debug_enabled = debug_enabled

def log(msg, level="INFO", uptime=False):
    if level == "DEBUG" and not _debug_enabled:
        return

    timestamp = get_log_timestamp()

    if uptime:
        elapsed = format_uptime(int((time.monotonic() - _start_time) * 1000))
        print(f"[{timestamp}][{level}] {msg} (elapsed: {elapsed})")
    else:
        print(f"[{timestamp}][{level}] {msg}")

def log_exception(msg, exc):
    log(f"{msg}: {exc}", "ERROR")
    # full traceback only when debugging
    if _debug_enabled:
        traceback.print_exception(type(exc), exc, exc.__traceback__)

def format_uptime(ms):
    seconds = ms // 1000
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0 or days > 0:
        parts.append(f"{hours}h")
    if minutes > 0 or hours > 0 or days > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)

def get_log_timestamp():
    # format as ISO8601 UTC
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
