"""Editor interativo de pontos e retas no quadrado normalizado [-1, 1]²."""

__version__ = "1.0.0"
