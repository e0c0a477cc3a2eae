# line_editor/ui_manager.py
from typing import Callable, Dict, Optional

from PyQt5.QtCore import QSignalBlocker, QSize, Qt
from PyQt5.QtWidgets import (
    QAction,
    QActionGroup,
    QLabel,
    QMainWindow,
    QStatusBar,
    QToolBar,
)

from .state_manager import EditorMode, EditorStateManager


class UIManager:
    """
    Gerenciador da interface do usuário do editor.

    Responsável por:
    - Configurar a barra de ferramentas com os quatro modos.
    - Configurar a barra de status (mensagem e modo atual).
    - Manter os elementos sincronizados com o estado da aplicação.
    """

    MODE_LABELS = {
        EditorMode.POINT: ("Ponto", "Adicionar pontos (P)"),
        EditorMode.LINE: ("Reta", "Ligar dois pontos existentes com uma reta (L)"),
        EditorMode.MOVE: ("Mover", "Arrastar uma reta mantendo a direção (M)"),
        EditorMode.INTERSECT: ("Interseção", "Marcar a interseção de duas retas (I)"),
    }

    def __init__(self, main_window: QMainWindow, state_manager: EditorStateManager):
        """
        Inicializa o gerenciador de interface.

        Args:
            main_window: Janela principal da aplicação
            state_manager: Gerenciador de estado da aplicação
        """
        self.window = main_window
        self.state_manager = state_manager

        self.toolbar: Optional[QToolBar] = None
        self.mode_action_group: Optional[QActionGroup] = None
        self._mode_actions: Dict[EditorMode, QAction] = {}

        self.status_bar: Optional[QStatusBar] = None
        self.status_message_label: Optional[QLabel] = None
        self.status_mode_label: Optional[QLabel] = None

    def setup_toolbar(self, mode_callback: Callable[[EditorMode], None]) -> QToolBar:
        """
        Configura a barra de ferramentas da aplicação.

        As teclas de modo são tratadas pela view; as ações não têm atalho
        próprio para não consumirem a tecla antes dela.

        Args:
            mode_callback: Callback para mudança de modo.

        Returns:
            QToolBar: Barra de ferramentas configurada.
        """
        toolbar = QToolBar("Modos")
        toolbar.setMovable(False)
        toolbar.setIconSize(QSize(24, 24))
        self.window.addToolBar(Qt.TopToolBarArea, toolbar)
        self.toolbar = toolbar

        self.mode_action_group = QActionGroup(self.window)
        self.mode_action_group.setExclusive(True)

        initial_mode = self.state_manager.mode()
        for mode, (name, tip) in self.MODE_LABELS.items():
            action = QAction(name, self.window)
            action.setToolTip(tip)
            action.setCheckable(True)
            action.setData(mode)
            action.triggered.connect(
                lambda checked, m=mode: mode_callback(m) if checked else None
            )
            toolbar.addAction(action)
            self.mode_action_group.addAction(action)
            self._mode_actions[mode] = action
            if mode == initial_mode:
                action.setChecked(True)
        return toolbar

    def setup_status_bar(self) -> QStatusBar:
        """Configura a barra de status com a mensagem e o modo atual."""
        self.status_bar = self.window.statusBar()
        self.status_message_label = QLabel("Pronto.")
        self.status_mode_label = QLabel()
        self.status_bar.addWidget(self.status_message_label, 1)
        self.status_bar.addPermanentWidget(self.status_mode_label)
        self.update_mode_display(self.state_manager.mode())
        return self.status_bar

    def update_mode_display(self, mode: EditorMode) -> None:
        """Marca a ação do modo atual e atualiza o rótulo da barra de status."""
        action = self._mode_actions.get(mode)
        if action is not None and not action.isChecked():
            blocker = QSignalBlocker(action)
            action.setChecked(True)
            del blocker
        if self.status_mode_label is not None:
            self.status_mode_label.setText(f"Modo: {self.MODE_LABELS[mode][0]}")

    def update_status_bar_message(self, message: str) -> None:
        if self.status_message_label is not None:
            self.status_message_label.setText(message)
