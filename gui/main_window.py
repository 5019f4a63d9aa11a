"""
Main Window for the range tree viewer.

Shows one scene with a toolbar to switch the indexed structure and to
draw a fresh input set.
"""

from PySide6.QtWidgets import (
    QMainWindow, QToolBar, QLabel, QComboBox, QPushButton, QStatusBar
)
from PySide6.QtCore import Qt

from rangetrees.config import Config, STRUCTURES
from rangetrees.errors import RangeTreeError
from rangetrees.scene import Scene, build_scene

from .widgets.scene_widget import SceneWidget, set_colors_config, set_viewer_config


class MainWindow(QMainWindow):
    """Viewer window around a SceneWidget."""

    def __init__(self, config: Config, scene: Scene, parent=None):
        super().__init__(parent)
        self.config = config
        set_colors_config(config.colors)
        set_viewer_config(config.viewer)

        self.setWindowTitle(config.viewer.window_title)
        self.resize(config.viewer.width, config.viewer.height)

        self._scene_widget = SceneWidget(scene)
        self.setCentralWidget(self._scene_widget)
        self._setup_toolbar(scene.structure)
        self.setStatusBar(QStatusBar())
        self._update_status()

    def _setup_toolbar(self, structure: str):
        toolbar = QToolBar("Scene")
        toolbar.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, toolbar)

        toolbar.addWidget(QLabel("Structure: "))
        self._structure_combo = QComboBox()
        self._structure_combo.addItems(list(STRUCTURES))
        self._structure_combo.setCurrentText(structure)
        self._structure_combo.currentTextChanged.connect(self._on_structure_changed)
        toolbar.addWidget(self._structure_combo)

        reseed_button = QPushButton("New Input")
        reseed_button.clicked.connect(self._on_reseed)
        toolbar.addWidget(reseed_button)

        quit_button = QPushButton("Quit")
        quit_button.clicked.connect(self.close)
        toolbar.addWidget(quit_button)

    def scene_widget(self) -> SceneWidget:
        return self._scene_widget

    def _rebuild(self, structure: str):
        try:
            scene = build_scene(structure, self.config.generator, self.config.query)
        except (RangeTreeError, ValueError) as e:
            self.statusBar().showMessage(f"Could not build {structure}: {e}")
            return
        self._scene_widget.set_scene(scene)
        self._update_status()

    def _on_structure_changed(self, structure: str):
        self._rebuild(structure)

    def _on_reseed(self):
        self.config.generator.seed += 1
        self._rebuild(self._structure_combo.currentText())

    def _update_status(self):
        scene = self._scene_widget.scene()
        total = len(scene.points) + len(scene.segments)
        reported = len(scene.reported_points) + len(scene.reported_segments)
        self.statusBar().showMessage(
            f"{scene.structure}: {reported} of {total} reported (seed {self.config.generator.seed})")
