"""Runedra Kraft: parameter-driven infusion calculators with a Qt front end."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("runedrakraft")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
