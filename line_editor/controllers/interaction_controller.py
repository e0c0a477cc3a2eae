# line_editor/controllers/interaction_controller.py
import logging
from typing import Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal

from ..state_manager import EditorStateManager, EditorMode
from ..models.point import Point
from ..models.point_collection import PointCollection
from ..models.line_collection import LineCollection, LineHandle

logger = logging.getLogger(__name__)


# --- Estados de cada modo: cada um guarda apenas o que o seu modo precisa ---


class PointModeState:
    mode = EditorMode.POINT


class LineModeState:
    mode = EditorMode.LINE

    def __init__(self, pending_start: Optional[Point] = None):
        self.pending_start: Optional[Point] = pending_start


class MoveModeState:
    mode = EditorMode.MOVE

    def __init__(self, selected: Optional[LineHandle] = None):
        self.selected: Optional[LineHandle] = selected


class IntersectModeState:
    mode = EditorMode.INTERSECT

    def __init__(self, first_selected: Optional[LineHandle] = None):
        self.first_selected: Optional[LineHandle] = first_selected


ModeState = Union[PointModeState, LineModeState, MoveModeState, IntersectModeState]

_STATE_FOR_MODE = {
    EditorMode.POINT: PointModeState,
    EditorMode.LINE: LineModeState,
    EditorMode.MOVE: MoveModeState,
    EditorMode.INTERSECT: IntersectModeState,
}


class InteractionController(QObject):
    """
    Controlador responsável por traduzir cliques e arrastos em operações sobre
    as coleções de pontos e retas.

    Recebe posições já convertidas para coordenadas normalizadas. Cada modo é
    uma pequena máquina de estados de dois cliques; trocar de modo descarta
    qualquer seleção pendente.
    """

    scene_changed = pyqtSignal()
    status_message_requested = pyqtSignal(str, int)  # (mensagem, timeout_ms)

    def __init__(
        self,
        points: PointCollection,
        lines: LineCollection,
        state_manager: EditorStateManager,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._points = points
        self._lines = lines
        self._state_manager = state_manager
        self._mode_state: ModeState = _STATE_FOR_MODE[state_manager.mode()]()

        self._state_manager.mode_changed.connect(self._reset_mode_state)

    def mode_state(self) -> ModeState:
        """Retorna o estado do modo atual (somente leitura para a UI e testes)."""
        return self._mode_state

    def _reset_mode_state(self, mode: EditorMode):
        self._mode_state = _STATE_FOR_MODE[mode]()

    # --- Eventos de entrada ---
    def handle_press(self, pos: Point):
        """Manipula um clique na viewport."""
        state = self._mode_state
        if isinstance(state, PointModeState):
            self._handle_point_press(pos)
        elif isinstance(state, LineModeState):
            self._handle_line_press(state, pos)
        elif isinstance(state, MoveModeState):
            self._handle_move_press(state, pos)
        elif isinstance(state, IntersectModeState):
            self._handle_intersect_press(state, pos)

    def handle_motion(self, pos: Point):
        """Arrasta a reta selecionada, se houver (apenas no modo MOVE)."""
        state = self._mode_state
        if isinstance(state, MoveModeState) and state.selected is not None:
            self._lines.translate_line(state.selected, pos)
            self.scene_changed.emit()

    def handle_release(self, pos: Point):
        """Solta a reta selecionada no modo MOVE."""
        state = self._mode_state
        if isinstance(state, MoveModeState):
            state.selected = None

    # --- Lógica de cada modo ---
    def _handle_point_press(self, pos: Point):
        self._points.add_point(pos)
        self.scene_changed.emit()

    def _handle_line_press(self, state: LineModeState, pos: Point):
        nearest = self._points.find_nearest_point(pos)
        if nearest is None:
            self.status_message_requested.emit("Nenhum ponto próximo ao clique.", 2000)
            return

        if state.pending_start is None:  # Primeiro clique
            state.pending_start = nearest
            self.status_message_requested.emit("Reta: Clique no segundo ponto.", 0)
            return

        if nearest == state.pending_start:
            self.status_message_requested.emit(
                "Ponto final igual ao inicial. Clique em outro ponto.", 2000
            )
            return

        self._lines.add_line(state.pending_start, nearest)
        state.pending_start = None
        self.scene_changed.emit()
        self.status_message_requested.emit("Reta adicionada.", 1000)

    def _handle_move_press(self, state: MoveModeState, pos: Point):
        if state.selected is None:
            state.selected = self._lines.find_nearest_line(pos)

    def _handle_intersect_press(self, state: IntersectModeState, pos: Point):
        handle = self._lines.find_nearest_line(pos)

        if state.first_selected is None:  # Primeiro clique
            if handle is None:
                self.status_message_requested.emit("Nenhuma reta sob o clique.", 2000)
                return
            state.first_selected = handle
            self.status_message_requested.emit("Interseção: Clique na segunda reta.", 0)
            return

        first = state.first_selected
        state.first_selected = None  # Reseta independente do resultado

        if handle is None or handle == first:
            self.status_message_requested.emit("Segunda reta inválida.", 2000)
            return

        intersection = self._lines[first].compute_intersection(self._lines[handle])
        if intersection is None:
            logger.info("Retas %d e %d são paralelas; nenhuma interseção.", first, handle)
            self.status_message_requested.emit("As retas são paralelas.", 2000)
            return

        self._points.add_point(intersection)
        self.scene_changed.emit()
