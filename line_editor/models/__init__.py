# line_editor/models/__init__.py
"""
Pacote que contém os modelos de dados do editor de pontos e retas.

Este pacote fornece os seguintes modelos:
- Point: Representa um ponto 2D em coordenadas homogêneas.
- Line: Representa uma reta 2D (pontos definidores + equação implícita).
- PointCollection: Coleção ordenada de pontos com busca por proximidade.
- LineCollection: Coleção ordenada de retas com busca por pertinência.
- LineRenderItem / PointRenderBatch: Dados entregues ao renderizador.
"""

from .point import Point
from .line import Line
from .point_collection import PointCollection
from .line_collection import LineCollection, LineHandle
from .render_items import LineRenderItem, PointRenderBatch

__all__ = [
    "Point",
    "Line",
    "PointCollection",
    "LineCollection",
    "LineHandle",
    "LineRenderItem",
    "PointRenderBatch",
]
