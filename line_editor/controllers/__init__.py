# line_editor/controllers/__init__.py
"""
Pacote que contém os controladores do editor.

Controladores são responsáveis por:
- Gerenciar a lógica de interação do usuário.
- Modificar as coleções de pontos e retas.
- Coordenar ações entre a UI, o estado e os modelos.

Controladores disponíveis:
- InteractionController: Máquina de estados dos quatro modos de edição.
- SceneController: Desenha pontos e retas exportados numa QGraphicsScene.
"""

from .interaction_controller import InteractionController
from .scene_controller import SceneController

__all__ = [
    "InteractionController",
    "SceneController",
]
