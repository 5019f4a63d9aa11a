"""
Range Tree Viewer GUI Module

PySide6-based window that draws a scene and its query result.
"""

from .main_window import MainWindow

__all__ = ['MainWindow']
