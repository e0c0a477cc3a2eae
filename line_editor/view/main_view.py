# line_editor/view/main_view.py
from PyQt5.QtWidgets import QGraphicsView, QGraphicsScene
from PyQt5.QtCore import Qt, QPointF, pyqtSignal
from PyQt5.QtGui import QMouseEvent, QPainter, QKeyEvent


class EditorView(QGraphicsView):
    """
    View de tamanho fixo que exibe a cena do editor.

    Não faz zoom, pan nem rotação: a posição de cada evento de mouse é emitida
    em pixels da cena, e a conversão para coordenadas normalizadas fica a
    cargo de quem recebe o sinal.
    """

    # (posição em pixels da cena, origem no canto superior esquerdo)
    pixel_pressed = pyqtSignal(QPointF)
    pixel_moved = pyqtSignal(QPointF)
    pixel_released = pyqtSignal(QPointF)
    # Texto da tecla pressionada (teclas de modo: p, l, m, i)
    key_pressed = pyqtSignal(str)

    def __init__(self, scene: QGraphicsScene, parent=None):
        super().__init__(scene, parent)
        self.setRenderHints(QPainter.Antialiasing)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.NoDrag)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setFrameShape(QGraphicsView.NoFrame)
        self.setCursor(Qt.CrossCursor)
        self.setFocusPolicy(Qt.StrongFocus)

    # --- Manipuladores de Eventos ---
    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.pixel_pressed.emit(self.mapToScene(event.pos()))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        if event.buttons() & Qt.LeftButton:  # Apenas arrastos
            self.pixel_moved.emit(self.mapToScene(event.pos()))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            self.pixel_released.emit(self.mapToScene(event.pos()))
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent):
        text = event.text()
        if text:
            self.key_pressed.emit(text)
            event.accept()
            return
        super().keyPressEvent(event)
