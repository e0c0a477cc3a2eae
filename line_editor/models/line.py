"""
Módulo que define a classe Line para representação de retas 2D.

Uma reta é guardada pelos seus dois pontos definidores (p1, p2). A equação
implícita Ax + By = C é sempre derivada desses pontos, de modo que as duas
representações nunca ficam fora de sincronia.
"""

# line_editor/models/line.py
import logging
import math
from typing import Optional, Tuple

import numpy as np
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor

from .point import Point
from ..utils import clipping as clp

logger = logging.getLogger(__name__)


class Line:
    """
    Representa uma reta 2D definida por dois pontos e pela sua equação implícita.

    Responsável por:
    - Armazenar os pontos definidores p1 e p2 (direção e comprimento).
    - Expor os coeficientes A, B, C da equação implícita Ax + By = C, onde
      A = p2.y - p1.y, B = p1.x - p2.x e C = A·p1.x + B·p1.y.
    - Testar pertinência de pontos, calcular interseções e transladar a reta.
    - Recortar a reta infinita contra a viewport normalizada para renderização.

    Uma reta degenerada (p1 == p2) é aceita: não contém nenhum ponto, não
    intercepta nenhuma outra reta e não produz segmento visível.
    """

    CONTAINS_TOLERANCE = 0.01  # Distância perpendicular máxima para "pertencer"
    PARALLEL_EPSILON = 1e-6  # |det| abaixo disso: retas paralelas/coincidentes
    TRANSLATE_HALF_LENGTH = 2.0  # Meia distância entre p1 e p2 após translate()

    RENDER_COLOR = QColor(Qt.cyan)
    RENDER_WIDTH = 3.0

    def __init__(self, p1: Point, p2: Point):
        """
        Inicializa uma reta a partir de dois pontos.

        Args:
            p1: Primeiro ponto definidor.
            p2: Segundo ponto definidor.

        Raises:
            TypeError: Se p1 ou p2 não forem instâncias de Point.
        """
        if not isinstance(p1, Point) or not isinstance(p2, Point):
            raise TypeError("p1 e p2 devem ser instâncias de Point.")
        self._p1: Point = p1
        self._p2: Point = p2
        logger.debug("Reta criada:\n%s", self.describe_equations())

    # --- Representação explícita ---
    @property
    def p1(self) -> Point:
        return self._p1

    @property
    def p2(self) -> Point:
        return self._p2

    # --- Representação implícita (derivada) ---
    @property
    def A(self) -> float:
        return self._p2.y - self._p1.y

    @property
    def B(self) -> float:
        return self._p1.x - self._p2.x

    @property
    def C(self) -> float:
        return self.A * self._p1.x + self.B * self._p1.y

    def coefficients(self) -> Tuple[float, float, float]:
        """Retorna os coeficientes (A, B, C) da equação implícita."""
        a, b = self.A, self.B
        return (a, b, a * self._p1.x + b * self._p1.y)

    def is_degenerate(self) -> bool:
        """Verdadeiro se os dois pontos definidores coincidem (A = B = 0)."""
        a, b = self.A, self.B
        return a == 0.0 and b == 0.0

    def direction(self) -> Tuple[float, float]:
        """Retorna a direção normalizada de p1 para p2, ou (0, 0) se degenerada."""
        delta = self._p2.to_array()[:2] - self._p1.to_array()[:2]
        norm = np.linalg.norm(delta)
        if norm == 0.0:
            return (0.0, 0.0)
        unit = delta / norm
        return (float(unit[0]), float(unit[1]))

    # --- Operações geométricas ---
    def distance_to(self, p: Point) -> float:
        """
        Distância perpendicular de um ponto até a reta.

        Returns:
            float: |A·x + B·y - C| / sqrt(A² + B²), ou math.inf para reta degenerada.
        """
        a, b, c = self.coefficients()
        magnitude = math.hypot(a, b)
        if magnitude == 0.0:
            return math.inf
        return abs(a * p.x + b * p.y - c) / magnitude

    def contains(self, p: Point) -> bool:
        """Verifica se o ponto está sobre a reta (dentro da tolerância)."""
        return self.distance_to(p) < self.CONTAINS_TOLERANCE

    def compute_intersection(self, other: "Line") -> Optional[Point]:
        """
        Calcula o ponto de interseção com outra reta pela regra de Cramer.

        Args:
            other: A outra reta.

        Returns:
            Optional[Point]: O ponto de interseção, ou None se as retas forem
                             paralelas ou coincidentes.
        """
        a1, b1, c1 = self.coefficients()
        a2, b2, c2 = other.coefficients()

        det = a1 * b2 - a2 * b1
        if abs(det) < self.PARALLEL_EPSILON:
            return None

        x = (b2 * c1 - b1 * c2) / det
        y = (a1 * c2 - a2 * c1) / det
        return Point(x, y)

    def translate(self, new_point: Point) -> None:
        """
        Desloca a reta para passar por new_point, mantendo a direção.

        Os pontos definidores são recalculados simetricamente em torno de
        new_point, a TRANSLATE_HALF_LENGTH de distância cada um. Como A, B e C
        são derivados dos pontos, C passa a valer A·new_point.x + B·new_point.y.
        A e B mantêm a direção, mas passam a ter módulo 2·TRANSLATE_HALF_LENGTH,
        então o teste absoluto de PARALLEL_EPSILON em compute_intersection pode
        classificar o mesmo par de direções de outra forma após a translação.

        Args:
            new_point: Ponto pelo qual a reta deve passar.
        """
        dx, dy = self.direction()  # Calculada antes da mutação
        k = self.TRANSLATE_HALF_LENGTH
        self._p1, self._p2 = (
            Point(new_point.x - dx * k, new_point.y - dy * k),
            Point(new_point.x + dx * k, new_point.y + dy * k),
        )

    def clip_to_viewport(
        self, clip_rect_tuple: clp.ClipRect = clp.NDC_CLIP_RECT
    ) -> Optional[Tuple[Point, Point]]:
        """
        Recorta a reta infinita contra a viewport (por padrão o quadrado [-1, 1]²).

        Returns:
            Optional[Tuple[Point, Point]]: Extremidades do segmento visível, ou
                                          None se a reta estiver fora da tela.
        """
        segment = clp.clip_infinite_line(
            self._p1.get_coords(), self._p2.get_coords(), clip_rect_tuple
        )
        if segment is None:
            return None
        start, end = segment
        return (Point(*start), Point(*end))

    def describe_equations(self) -> str:
        """Retorna as equações implícita e paramétrica da reta em texto."""
        a, b, c = self.coefficients()
        return (
            f"\t Implícita: {a:.2f} x + {b:.2f} y = {c:.2f}\n"
            f"\t Paramétrica: r(t) = ({self._p1.x:.2f}, {self._p1.y:.2f}) + "
            f"({self._p2.x - self._p1.x:.2f}, {self._p2.y - self._p1.y:.2f})t"
        )

    def __repr__(self) -> str:
        return f"Line(p1={self._p1!r}, p2={self._p2!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self._p1 == other._p1 and self._p2 == other._p2
