"""
Registros simples entregues ao renderizador externo.

Não fazem nenhuma chamada gráfica: apenas carregam geometria já recortada e
as dicas de aparência (cor, espessura, tamanho).
"""

# line_editor/models/render_items.py
from typing import List, NamedTuple

from PyQt5.QtGui import QColor

from .point import Point


class LineRenderItem(NamedTuple):
    """Segmento visível de uma reta, já recortado ao quadrado [-1, 1]²."""

    start: Point
    end: Point
    color: QColor
    width: float


class PointRenderBatch(NamedTuple):
    """Todos os pontos da coleção com cor e tamanho fixos."""

    points: List[Point]
    color: QColor
    size: float
