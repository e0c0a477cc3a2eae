# line_editor/main.py
import logging
import sys

from PyQt5.QtWidgets import QApplication, QMessageBox
from PyQt5.QtCore import Qt

from .logging_config import init_logging

logger = logging.getLogger(__name__)


def main():
    """Configura e executa a aplicação do editor de pontos e retas."""
    init_logging()

    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    app = QApplication(sys.argv)

    editor_instance = None
    try:
        # Importação dentro do try para capturar erros de dependências/estrutura
        from .editor import LineEditorWindow

        editor_instance = LineEditorWindow()

    except ImportError as e:
        logger.exception("Erro crítico de importação")
        QMessageBox.critical(
            None,
            "Erro de Importação",
            f"Falha ao importar componentes necessários da aplicação.\n\n"
            f"Erro: {e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    except Exception as e:
        logger.exception("Erro inesperado na inicialização")
        QMessageBox.critical(
            None,
            "Erro Inesperado na Inicialização",
            f"Ocorreu um erro inesperado ao iniciar a aplicação:\n\n"
            f"{e}\n\n"
            f"Consulte o console para detalhes técnicos.",
        )
        sys.exit(1)

    editor_instance.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
