"""
Run with: python -m runedrakraft.app.main
"""
from __future__ import annotations

import sys

from runedrakraft.app.application import create_app
from runedrakraft.app.ui.main_window import MainWindow
from runedrakraft.config import DEFAULT_LOG_LEVEL
from runedrakraft.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=DEFAULT_LOG_LEVEL)
    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
