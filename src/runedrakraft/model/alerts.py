"""User-facing notifications produced by the model layer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class AlertType(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Alert:
    """A message plus its severity; presentation is up to the shell."""
    type: AlertType
    title: str
    message: str
