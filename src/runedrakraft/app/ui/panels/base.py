from __future__ import annotations

from PySide6.QtWidgets import QWidget

from runedrakraft.app.state import Store
from runedrakraft.model.session import InfusionSession


class BasePanel(QWidget):
    """Base class for variant panels. Holds a reference to the global store and its variant key."""
    def __init__(self, store: Store, key: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.key = key

    @property
    def session(self) -> InfusionSession:
        return self.store.session(self.key)
