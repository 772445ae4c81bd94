"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps paths and tunable values (delays, names) out of the
   widgets and the model.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets when the app is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    PROCESSING_DELAY_S (float): Default artificial "processing" delay.
    SUCCESS_BANNER_S (float): How long the completion banner stays visible.
"""
import logging
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/runedrakraft/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Application identity
ORG_ID = "runedra"
APP_ID = "runedrakraft"
VISIBLE_APP_NAME = "Runedra Kraft"
APP_TAGLINE = "Select a system to interface"

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")

# Cosmetic timings (seconds). They never change computed values.
PROCESSING_DELAY_S: float = 1.5
SUCCESS_BANNER_S: float = 1.5

DEFAULT_LOG_LEVEL: int = logging.INFO
