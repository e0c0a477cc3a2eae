# line_editor/editor.py
import logging

from PyQt5.QtCore import QPointF, QTimer
from PyQt5.QtWidgets import QGraphicsScene, QMainWindow

from .view.main_view import EditorView
from .models import LineCollection, Point, PointCollection
from .controllers.interaction_controller import InteractionController
from .controllers.scene_controller import SceneController
from .state_manager import EditorMode, EditorStateManager
from .ui_manager import UIManager
from .utils import transformations as tf

logger = logging.getLogger(__name__)


class LineEditorWindow(QMainWindow):
    """
    Janela principal: liga a view, o estado, as coleções e os controladores.

    Os cliques chegam da view em pixels, são convertidos para coordenadas
    normalizadas e entregues ao InteractionController.
    """

    WINDOW_SIZE = 600  # Lado da área de desenho, em pixels
    STATUS_RESET_MS = 3000

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Editor de Pontos e Retas")

        self._status_reset_timer = QTimer(self)
        self._status_reset_timer.setSingleShot(True)
        self._status_reset_timer.timeout.connect(
            lambda: self._ui_manager.update_status_bar_message("Pronto.")
        )

        self._setup_core_components()
        self._setup_managers_controllers()
        self._setup_ui_elements()
        self._connect_signals()
        self._scene_controller.refresh()

    def _setup_core_components(self) -> None:
        self._points = PointCollection()
        self._lines = LineCollection()
        self._pixel_to_ndc = tf.create_viewport_to_ndc_matrix(
            self.WINDOW_SIZE, self.WINDOW_SIZE
        )

        self._scene = QGraphicsScene(self)
        self._view = EditorView(self._scene, self)
        self._view.setFixedSize(self.WINDOW_SIZE, self.WINDOW_SIZE)
        self.setCentralWidget(self._view)

    def _setup_managers_controllers(self) -> None:
        self._state_manager = EditorStateManager(self)
        self._ui_manager = UIManager(self, self._state_manager)
        self._interaction_controller = InteractionController(
            self._points, self._lines, self._state_manager, self
        )
        self._scene_controller = SceneController(
            self._scene, self._points, self._lines, self.WINDOW_SIZE, self
        )

    def _setup_ui_elements(self) -> None:
        self._ui_manager.setup_toolbar(mode_callback=self._state_manager.set_mode)
        self._ui_manager.setup_status_bar()

    def _connect_signals(self) -> None:
        self._view.pixel_pressed.connect(
            lambda pos: self._interaction_controller.handle_press(self._to_ndc(pos))
        )
        self._view.pixel_moved.connect(
            lambda pos: self._interaction_controller.handle_motion(self._to_ndc(pos))
        )
        self._view.pixel_released.connect(
            lambda pos: self._interaction_controller.handle_release(self._to_ndc(pos))
        )
        self._view.key_pressed.connect(self._handle_key)

        self._state_manager.mode_changed.connect(self._ui_manager.update_mode_display)
        self._interaction_controller.scene_changed.connect(self._scene_controller.refresh)
        self._interaction_controller.status_message_requested.connect(
            self._show_status_message
        )

    def _to_ndc(self, pixel_pos: QPointF) -> Point:
        [(x, y)] = tf.apply_transformation([(pixel_pos.x(), pixel_pos.y())], self._pixel_to_ndc)
        return Point(x, y)

    def _handle_key(self, key: str) -> None:
        mode = EditorMode.from_key(key)
        if mode is not None:
            self._state_manager.set_mode(mode)

    def _show_status_message(self, message: str, timeout_ms: int) -> None:
        self._ui_manager.update_status_bar_message(message)
        self._status_reset_timer.stop()
        if timeout_ms > 0:
            self._status_reset_timer.start(timeout_ms)
