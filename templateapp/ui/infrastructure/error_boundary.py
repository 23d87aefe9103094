from __future__ import annotations

import logging
import sys
import threading
import traceback


def install_error_boundary(window=None) -> None:
    """Install global exception hooks.

    Unhandled exceptions from the main thread and worker threads are logged; when a
    window with a status bar is given, a short hint is shown there too.
    """

    log = logging.getLogger(__name__)

    def _handle(exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
            status = window.statusBar() if window is not None else None
            if status is not None:
                status.showMessage(f"Unexpected error: {exc_type.__name__}. See logs.", 8000)
        finally:
            # Keep default behavior in console
            sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
