# line_editor/controllers/scene_controller.py
from typing import List, Optional

from PyQt5.QtCore import QObject, QLineF, QRectF
from PyQt5.QtGui import QBrush, QColor, QPen
from PyQt5.QtWidgets import QGraphicsEllipseItem, QGraphicsItem, QGraphicsLineItem, QGraphicsScene

from ..models.point_collection import PointCollection
from ..models.line_collection import LineCollection
from ..utils import transformations as tf


class SceneController(QObject):
    """
    Controlador que desenha o conteúdo das coleções numa QGraphicsScene.

    A cena usa coordenadas de pixel (origem no canto superior esquerdo). A cada
    refresh() os itens são recriados a partir dos dados exportados pelas
    coleções, convertendo de coordenadas normalizadas para pixels.
    """

    BACKGROUND_COLOR = QColor.fromRgbF(0.2, 0.2, 0.2)

    def __init__(
        self,
        scene: QGraphicsScene,
        points: PointCollection,
        lines: LineCollection,
        size: int,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._scene = scene
        self._points = points
        self._lines = lines
        self._items: List[QGraphicsItem] = []

        self._scene.setSceneRect(QRectF(0, 0, size, size))
        self._scene.setBackgroundBrush(QBrush(self.BACKGROUND_COLOR))
        self._ndc_to_pixel = tf.create_ndc_to_viewport_matrix(size, size)

    def refresh(self):
        """Remove os itens atuais e redesenha retas e pontos."""
        for item in self._items:
            if item.scene():
                self._scene.removeItem(item)
        self._items = []

        # Retas primeiro, pontos por cima
        for render_item in self._lines.export_for_render():
            (x1, y1), (x2, y2) = tf.apply_transformation(
                [render_item.start.get_coords(), render_item.end.get_coords()],
                self._ndc_to_pixel,
            )
            line_item = QGraphicsLineItem(QLineF(x1, y1, x2, y2))
            line_item.setPen(QPen(render_item.color, render_item.width))
            self._add_item(line_item)

        batch = self._points.export_for_render()
        pixel_coords = tf.apply_transformation(
            [p.get_coords() for p in batch.points], self._ndc_to_pixel
        )
        offset = batch.size / 2.0
        for px, py in pixel_coords:
            point_item = QGraphicsEllipseItem(px - offset, py - offset, batch.size, batch.size)
            point_item.setPen(QPen(batch.color, 1))
            point_item.setBrush(QBrush(batch.color))
            self._add_item(point_item)

    def _add_item(self, item: QGraphicsItem):
        self._scene.addItem(item)
        self._items.append(item)
