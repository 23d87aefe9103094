"""
Entry point for the TemplateApp Qt UI.

Run: python -m templateapp  (or the ``templateapp`` console script)
"""
from __future__ import annotations

import sys

from templateapp.core.observability.logging_config import setup_logging
from templateapp.ui.infrastructure import (
    AppSettings,
    Container,
    create_application,
    install_error_boundary,
    run_application,
)
from templateapp.ui.shell import MainWindow


def main() -> None:
    setup_logging()
    app = create_application()
    settings = AppSettings()

    container = Container()
    # Created eagerly so the application palette follows the very first broadcast.
    _ = container.theme_manager

    window = MainWindow(settings, container=container)
    window.show()
    install_error_boundary(window)

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
