"""
Módulo que implementa o recorte (clipping) de retas infinitas para gráficos 2D.

A reta é dada na forma paramétrica p1 + t·(p2 − p1) e recortada contra um
retângulo alinhado aos eixos calculando os quatro cruzamentos com as bordas
(x = xmin, x = xmax, y = ymin, y = ymax). Somente cruzamentos cuja outra
coordenada cai dentro do retângulo são mantidos.
"""

# line_editor/utils/clipping.py
from typing import List, Optional, Tuple

Point2D = Tuple[float, float]

# (xmin, ymin, xmax, ymax), assume xmin < xmax e ymin < ymax.
ClipRect = Tuple[float, float, float, float]

# Quadrado canônico das coordenadas normalizadas de dispositivo.
NDC_CLIP_RECT: ClipRect = (-1.0, -1.0, 1.0, 1.0)

EPSILON = 1e-9  # Pequena tolerância para comparações de ponto flutuante


def _within(value: float, low: float, high: float) -> bool:
    return low - EPSILON <= value <= high + EPSILON


def _append_unique(crossings: List[Point2D], candidate: Point2D) -> None:
    # Reta passando por um canto gera o mesmo cruzamento em duas bordas
    for existing in crossings:
        if abs(existing[0] - candidate[0]) < EPSILON and abs(existing[1] - candidate[1]) < EPSILON:
            return
    crossings.append(candidate)


def boundary_crossings(
    p1: Point2D, p2: Point2D, clip_rect_tuple: ClipRect = NDC_CLIP_RECT
) -> List[Point2D]:
    """
    Calcula os cruzamentos distintos da reta infinita (p1, p2) com as bordas do retângulo.

    Args:
        p1: Primeiro ponto que define a reta.
        p2: Segundo ponto que define a reta.
        clip_rect_tuple: Retângulo de recorte (xmin, ymin, xmax, ymax).

    Returns:
        List[Point2D]: De zero a quatro cruzamentos, na ordem
                       x = xmin, x = xmax, y = ymin, y = ymax (sem repetições).
    """
    x1, y1 = p1
    dx = p2[0] - x1
    dy = p2[1] - y1
    xmin, ymin, xmax, ymax = clip_rect_tuple

    crossings: List[Point2D] = []

    if dx != 0:  # Reta não vertical: cruza as bordas verticais
        for x_edge in (xmin, xmax):
            t = (x_edge - x1) / dx
            y = y1 + t * dy
            if _within(y, ymin, ymax):
                _append_unique(crossings, (x_edge, y))

    if dy != 0:  # Reta não horizontal: cruza as bordas horizontais
        for y_edge in (ymin, ymax):
            t = (y_edge - y1) / dy
            x = x1 + t * dx
            if _within(x, xmin, xmax):
                _append_unique(crossings, (x, y_edge))

    return crossings


def clip_infinite_line(
    p1: Point2D, p2: Point2D, clip_rect_tuple: ClipRect = NDC_CLIP_RECT
) -> Optional[Tuple[Point2D, Point2D]]:
    """
    Recorta a reta infinita que passa por p1 e p2 contra o retângulo de recorte.

    Args:
        p1: Primeiro ponto que define a reta.
        p2: Segundo ponto que define a reta.
        clip_rect_tuple: Retângulo de recorte (xmin, ymin, xmax, ymax).

    Returns:
        Optional[Tuple[Point2D, Point2D]]: O segmento visível, ou None se a reta
                                            não atravessa o retângulo (ou se p1 == p2).
    """
    crossings = boundary_crossings(p1, p2, clip_rect_tuple)
    if len(crossings) < 2:
        return None
    return (crossings[0], crossings[1])
