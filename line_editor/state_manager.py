# line_editor/state_manager.py
import logging
from enum import Enum
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class EditorMode(Enum):
    """
    Enumeração que define os modos de interação do editor.

    O valor de cada membro é a tecla que ativa o modo.

    Atributos:
        POINT: Cada clique adiciona um ponto.
        LINE: Dois cliques escolhem os pontos existentes que definem uma reta.
        MOVE: Arrasta a reta clicada, mantendo sua direção.
        INTERSECT: Dois cliques escolhem retas; a interseção vira um novo ponto.
    """

    POINT = "p"
    LINE = "l"
    MOVE = "m"
    INTERSECT = "i"

    @classmethod
    def from_key(cls, key: str) -> Optional["EditorMode"]:
        """Retorna o modo associado à tecla, ou None se a tecla não for de modo."""
        for mode in cls:
            if mode.value == key.lower():
                return mode
        return None


class EditorStateManager(QObject):
    """
    Gerencia o estado central da aplicação do editor.

    Responsável por:
    - Modo de interação atual.
    - Notificar os interessados quando o modo muda.
    """

    # --- Sinais de Mudança de Estado ---
    mode_changed = pyqtSignal(EditorMode)

    # --- Constantes ---
    DEFAULT_MODE = EditorMode.POINT

    def __init__(self, parent: Optional[QObject] = None):
        """
        Inicializa o gerenciador de estado.

        Args:
            parent: Objeto pai opcional
        """
        super().__init__(parent)
        self._mode: EditorMode = self.DEFAULT_MODE

    def mode(self) -> EditorMode:
        """
        Retorna o modo de interação atual.

        Returns:
            EditorMode: Modo atual
        """
        return self._mode

    def set_mode(self, mode: EditorMode):
        """
        Define o modo de interação.

        O sinal mode_changed é emitido mesmo quando o modo escolhido é o atual,
        para que uma seleção em andamento seja descartada (como ao pressionar
        de novo a tecla do modo).

        Args:
            mode: Novo modo
        """
        if not isinstance(mode, EditorMode):
            logger.warning("Tipo de modo inválido: %r", mode)
            return
        self._mode = mode
        logger.info("Modo: %s", mode.value)
        self.mode_changed.emit(mode)
