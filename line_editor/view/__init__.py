"""Views Qt do editor."""

from .main_view import EditorView

__all__ = ["EditorView"]
