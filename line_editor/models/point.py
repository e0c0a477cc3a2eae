"""
Módulo que define a classe Point para representação de pontos 2D.
Este módulo contém a implementação de pontos no espaço lógico normalizado.
"""

# line_editor/models/point.py
import math
from typing import Tuple

import numpy as np


class Point:
    """
    Representa um ponto geométrico 2D em coordenadas homogêneas.

    Responsável por:
    - Armazenar coordenadas (x, y) de um ponto.
    - Manter a coordenada homogênea w fixa em 1.0 (compatível com matrizes afins).
    - Fornecer métodos de conversão e distância.

    Pontos não possuem identidade própria: dois pontos nas mesmas coordenadas
    são iguais. São imutáveis, então podem ser compartilhados entre coleções
    e renderizador sem cópia.
    """

    __slots__ = ("_x", "_y")

    HOMOGENEOUS_W = 1.0
    EQUALITY_EPSILON = 1e-9

    def __init__(self, x: float, y: float):
        """
        Inicializa um ponto com coordenadas.

        Args:
            x: Coordenada x do ponto.
            y: Coordenada y do ponto.
        """
        self._x: float = float(x)
        self._y: float = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def w(self) -> float:
        return self.HOMOGENEOUS_W

    def to_array(self) -> np.ndarray:
        """Retorna o vetor homogêneo [x, y, 1] do ponto."""
        return np.array([self.x, self.y, self.w], dtype=float)

    def get_coords(self) -> Tuple[float, float]:
        """Retorna as coordenadas (x, y) do ponto."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Distância euclidiana até outro ponto."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"Point(x={self.x:.3f}, y={self.y:.3f})"

    def __eq__(self, other: object) -> bool:
        """Verifica se dois Pontos são iguais (baseado nas coordenadas)."""
        if not isinstance(other, Point):
            return NotImplemented
        epsilon = self.EQUALITY_EPSILON
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon
