"""
Módulo que define a PointCollection, a coleção ordenada de pontos do editor.
"""

# line_editor/models/point_collection.py
import logging
from typing import Iterator, List, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor

from .point import Point
from .render_items import PointRenderBatch

logger = logging.getLogger(__name__)


class PointCollection:
    """
    Gerencia os pontos colocados pelo usuário.

    Responsável por:
    - Guardar os pontos na ordem de inserção (duplicatas são permitidas).
    - Encontrar o ponto mais próximo de um clique dentro do raio de captura.
    - Exportar os pontos para o renderizador com cor e tamanho fixos.
    """

    CAPTURE_RADIUS = 1.0  # Pontos mais distantes que isso nunca são capturados

    RENDER_COLOR = QColor(Qt.red)
    RENDER_SIZE = 10.0

    def __init__(self):
        self._points: List[Point] = []

    def add_point(self, p: Point) -> None:
        """
        Adiciona um ponto à coleção, sem qualquer validação ou deduplicação.

        Args:
            p: Ponto a ser adicionado.
        """
        self._points.append(p)
        logger.info("Ponto adicionado: (%.2f, %.2f)", p.x, p.y)

    def find_nearest_point(self, p: Point) -> Optional[Point]:
        """
        Encontra o ponto armazenado mais próximo de p.

        A varredura segue a ordem de inserção e usa comparação estrita, então
        entre pontos à mesma distância o primeiro inserido vence.

        Args:
            p: Posição de consulta (normalmente o clique do usuário).

        Returns:
            Optional[Point]: O ponto mais próximo a menos de CAPTURE_RADIUS,
                             ou None se nenhum se qualificar.
        """
        min_dist = self.CAPTURE_RADIUS
        closest: Optional[Point] = None
        for pt in self._points:
            dist = pt.distance_to(p)
            if dist < min_dist:
                min_dist = dist
                closest = pt
        return closest

    def export_for_render(self) -> PointRenderBatch:
        """Retorna uma cópia da lista de pontos (imutáveis) com as dicas de renderização."""
        return PointRenderBatch(list(self._points), self.RENDER_COLOR, self.RENDER_SIZE)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]
