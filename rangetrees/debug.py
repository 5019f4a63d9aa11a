"""
Process-wide debug output switch.

Modules print through `debug_print`, which stays silent until
`set_debug_enabled(True)` is called (the entry script does this for --debug).
"""

import sys
from datetime import datetime

_debug_enabled = False


def set_debug_enabled(enabled: bool) -> None:
    global _debug_enabled
    _debug_enabled = enabled


def is_debug_enabled() -> bool:
    return _debug_enabled


def debug_print(tag: str, msg: str) -> None:
    if not _debug_enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {tag}: {msg}", file=sys.stderr)
