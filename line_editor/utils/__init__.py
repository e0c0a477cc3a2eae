# line_editor/utils/__init__.py
"""
Pacote de utilitários para o editor de pontos e retas.

Contém módulos para:
- clipping: Recorte de retas infinitas contra a viewport normalizada.
- transformations: Matrizes homogêneas 2D, incluindo pixel <-> coordenadas normalizadas.
"""

from . import clipping
from . import transformations

__all__ = [
    "clipping",
    "transformations",
]
