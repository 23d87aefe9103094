"""App shell: main window hosting the themed screens in tabs."""

from templateapp.ui.shell.main_window import MainWindow

__all__ = ["MainWindow"]
