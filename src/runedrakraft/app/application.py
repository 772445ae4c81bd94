from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtGui import QIcon

import sys
import os

from runedrakraft.config import ASSETS_PATH, ORG_ID, APP_ID, VISIBLE_APP_NAME


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    icon_path = os.path.join(ASSETS_PATH, "icon.svg")
    if os.path.exists(icon_path):
        app.setWindowIcon(QIcon(icon_path))

    return app
