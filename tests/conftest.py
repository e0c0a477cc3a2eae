"""Fixtures compartilhadas da suíte de testes do line_editor.

Os controladores são QObjects com sinais; uma QCoreApplication é criada uma
única vez para a sessão (não exige display).
"""

import pytest
from PyQt5.QtCore import QCoreApplication


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
