"""
Range Tree Viewer Widgets

Custom widgets for drawing scenes.
"""

from .scene_widget import SceneWidget

__all__ = ['SceneWidget']
