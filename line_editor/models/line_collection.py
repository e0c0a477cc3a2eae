"""
Módulo que define a LineCollection, a coleção ordenada de retas do editor.

Retas encontradas por busca são identificadas por um LineHandle (o índice da
reta na coleção). Como a coleção só cresce, o handle continua válido pelo
tempo de vida da coleção, ao contrário de uma referência guardada entre
mutações.
"""

# line_editor/models/line_collection.py
import logging
from typing import Iterator, List, Optional

from .line import Line
from .point import Point
from .render_items import LineRenderItem

logger = logging.getLogger(__name__)

LineHandle = int


class LineCollection:
    """
    Gerencia as retas criadas pelo usuário.

    Responsável por:
    - Criar e guardar retas na ordem de inserção (sem mesclar duplicatas).
    - Encontrar a primeira reta que contém um ponto.
    - Transladar uma reta identificada pelo seu handle.
    - Exportar os segmentos visíveis para o renderizador.
    """

    def __init__(self):
        self._lines: List[Line] = []

    def add_line(self, p1: Point, p2: Point) -> LineHandle:
        """
        Cria uma reta a partir de dois pontos e a adiciona à coleção.

        Returns:
            LineHandle: Handle da reta recém-criada.
        """
        line = Line(p1, p2)
        self._lines.append(line)
        logger.info("Reta adicionada:\n%s", line.describe_equations())
        return len(self._lines) - 1

    def find_nearest_line(self, p: Point) -> Optional[LineHandle]:
        """
        Retorna a primeira reta (em ordem de inserção) que contém p.

        Não é uma busca pela menor distância: qualquer reta dentro da faixa
        de tolerância serve, e a mais antiga vence.

        Args:
            p: Posição de consulta.

        Returns:
            Optional[LineHandle]: Handle da reta encontrada, ou None.
        """
        for handle, line in enumerate(self._lines):
            if line.contains(p):
                return handle
        return None

    def translate_line(self, handle: LineHandle, new_point: Point) -> None:
        """Desloca a reta identificada por handle para passar por new_point."""
        self._lines[handle].translate(new_point)

    def export_for_render(self) -> List[LineRenderItem]:
        """
        Recorta cada reta contra a viewport e retorna os segmentos visíveis.

        Retas fora da tela não geram item.
        """
        items: List[LineRenderItem] = []
        for line in self._lines:
            segment = line.clip_to_viewport()
            if segment is None:
                continue
            start, end = segment
            items.append(LineRenderItem(start, end, Line.RENDER_COLOR, Line.RENDER_WIDTH))
        return items

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def __getitem__(self, handle: LineHandle) -> Line:
        return self._lines[handle]
