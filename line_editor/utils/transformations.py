# line_editor/utils/transformations.py
import numpy as np
from typing import List, Tuple

# Alias para clareza
VertexList2D = List[Tuple[float, float]]

# Constante pequena para comparações de ponto flutuante
EPSILON = 1e-9

# --- Funções para criar matrizes de transformação 2D 3x3 (homogêneas) ---


def create_translation_matrix(dx: float, dy: float) -> np.ndarray:
    """
    Cria matriz de translação 2D (homogênea 3x3).

    Args:
        dx: Deslocamento no eixo x.
        dy: Deslocamento no eixo y.

    Returns:
        np.ndarray: Matriz de translação 3x3.
    """
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]], dtype=float)


def create_scaling_matrix(sx: float, sy: float) -> np.ndarray:
    """
    Cria matriz de escala 2D (homogênea 3x3) relativa à origem.

    Returns:
        np.ndarray: Matriz de escala 3x3.
        Retorna matriz identidade se sx ou sy forem muito próximos de zero.
    """
    if abs(sx) < EPSILON or abs(sy) < EPSILON:
        return np.identity(3, dtype=float)

    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]], dtype=float)


def create_viewport_to_ndc_matrix(width: float, height: float) -> np.ndarray:
    """
    Cria a matriz que leva pixels da viewport para coordenadas normalizadas.

    O pixel (0, 0) é o canto superior esquerdo; y cresce para baixo na tela e
    para cima no espaço normalizado:
        x_ndc = 2·px / width - 1
        y_ndc = 1 - 2·py / height

    Args:
        width: Largura da viewport em pixels.
        height: Altura da viewport em pixels.

    Returns:
        np.ndarray: Matriz 3x3 pixel -> NDC.

    Raises:
        ValueError: Se largura ou altura não forem positivas.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Dimensões da viewport inválidas: {width}x{height}")
    scale = create_scaling_matrix(2.0 / width, -2.0 / height)
    return create_translation_matrix(-1.0, 1.0) @ scale


def create_ndc_to_viewport_matrix(width: float, height: float) -> np.ndarray:
    """Inversa de create_viewport_to_ndc_matrix (NDC -> pixels)."""
    return np.linalg.inv(create_viewport_to_ndc_matrix(width, height))


# --- Função para aplicar a transformação 2D ---


def apply_transformation(vertices: VertexList2D, matrix: np.ndarray) -> VertexList2D:
    """
    Aplica uma matriz de transformação 2D 3x3 a uma lista de vértices 2D.

    Args:
        vertices: Lista de tuplas (x, y) representando os vértices.
        matrix: Matriz NumPy 3x3 de transformação.

    Returns:
        VertexList2D: Nova lista de tuplas (x, y) transformadas.
        Retorna lista vazia se a entrada for vazia.
    """
    if not vertices:
        return []

    vertex_array = np.array(vertices, dtype=float)  # Formato (N, 2)
    # Adiciona coordenada homogênea w=1 para cada vértice -> (N, 3)
    homogeneous_coords = np.hstack(
        [vertex_array, np.ones((vertex_array.shape[0], 1), dtype=float)]
    )

    transformed_homogeneous = (matrix.astype(float) @ homogeneous_coords.T).T

    # Evita divisão por zero tratando w próximo de zero como 1
    w_coords = transformed_homogeneous[:, 2]
    w_divisor = np.where(np.abs(w_coords) < EPSILON, 1.0, w_coords)
    transformed_coords = transformed_homogeneous[:, :2] / w_divisor[:, np.newaxis]

    return [(float(x), float(y)) for x, y in transformed_coords]
