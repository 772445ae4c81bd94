"""
Infusion Control Panel
======================
One panel per registered variant. All labels, ranges and texts come from the
VariantConfig; the panel only binds widgets to the session's ParameterSet.
"""
from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QGuiApplication
from PySide6.QtWidgets import (
    QComboBox, QDoubleSpinBox, QGridLayout, QGroupBox, QHBoxLayout, QLabel,
    QLineEdit, QMessageBox, QPushButton, QSizePolicy, QSpinBox, QVBoxLayout, QWidget
)

from runedrakraft.app.state import Store
from runedrakraft.app.ui.panels.base import BasePanel
from runedrakraft.app.ui.results import ResultsView
from runedrakraft.model.alerts import Alert, AlertType
from runedrakraft.model.calculator import ResultRecord
from runedrakraft.model.session import SessionState
from runedrakraft.model.variants import Bounds

logger = logging.getLogger(__name__)

ALERT_ICONS = {
    AlertType.INFO: QMessageBox.Icon.Information,
    AlertType.WARNING: QMessageBox.Icon.Warning,
    AlertType.ERROR: QMessageBox.Icon.Critical,
    AlertType.SUCCESS: QMessageBox.Icon.Information,
}


class InfusionPanel(BasePanel):
    def __init__(self, store: Store, key: str, parent: QWidget | None = None) -> None:
        super().__init__(store, key, parent)
        self.variant = self.session.variant
        self._row = 0

        root = QVBoxLayout(self)

        # --- Header ---
        title = QLabel(self.variant.title, self)
        title.setStyleSheet("font-size: 20pt; font-weight: 800;")
        subtitle = QLabel(self.variant.subtitle, self)
        subtitle.setStyleSheet("color: gray;")
        root.addWidget(title)
        root.addWidget(subtitle)

        # --- Parameters ---
        grp_params = QGroupBox(self.variant.sections.parameters, self)
        self.grid_params = QGridLayout(grp_params)
        self.spin_primary = self._add_spin(
            self.grid_params, self.variant.primary_label, self.variant.primary_bounds,
            decimals=0, suffix=self.variant.primary_unit
        )
        self.spin_rate = self._add_spin(
            self.grid_params, self.variant.rate_label, self.variant.rate_bounds,
            decimals=1, suffix=self.variant.rate_unit
        )
        self.edit_factor_a = self._add_line_edit(self.grid_params, self.variant.factor_a.label)
        self.edit_factor_b = self._add_line_edit(self.grid_params, self.variant.factor_b.label)

        self.spin_iterations = QSpinBox(self)
        bounds = self.variant.iterations_bounds
        self.spin_iterations.setRange(int(bounds.minimum), int(bounds.maximum))
        self._add_row(self.grid_params, self.variant.iterations_label, self.spin_iterations)
        root.addWidget(grp_params)

        # --- Configuration ---
        grp_config = QGroupBox(self.variant.sections.configuration, self)
        self.grid_config = QGridLayout(grp_config)
        self.combo_protocol = self._add_combo(
            self.grid_config, self.variant.protocol_label, [p.value for p in self.variant.protocols]
        )
        self.combo_material = self._add_combo(
            self.grid_config, self.variant.material_label, [m.value for m in self.variant.materials]
        )
        self.spin_resonance = self._add_spin(
            self.grid_config, self.variant.resonance_label, self.variant.resonance_bounds,
            decimals=1, suffix=self.variant.resonance_unit
        )
        self.combo_intensity = self._add_combo(
            self.grid_config, self.variant.intensity_title, list(self.variant.intensity_labels.values())
        )
        root.addWidget(grp_config)

        # --- Actions ---
        hbox = QHBoxLayout()
        self.btn_submit = QPushButton(self.variant.sections.submit_button, self)
        self.btn_submit.setMinimumHeight(40)
        self.btn_submit.clicked.connect(self.on_submit_clicked)
        self.btn_reset = QPushButton(self.variant.sections.reset_button, self)
        self.btn_reset.setMinimumHeight(40)
        self.btn_reset.clicked.connect(lambda: self.store.reset(self.key))
        hbox.addWidget(self.btn_submit)
        hbox.addWidget(self.btn_reset)
        root.addLayout(hbox)

        # --- Status / Banner ---
        self.lbl_status = QLabel("", self)
        self.lbl_status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_status.setWordWrap(True)
        root.addWidget(self.lbl_status)

        # --- Results ---
        self.results_view = ResultsView(self.session.calculator, self)
        root.addWidget(self.results_view)
        root.addStretch()

        self.load_from_state()
        self._connect_inputs()

        self.store.state_changed.connect(self._on_state_changed)
        self.store.computation_finished.connect(self._on_computation_finished)
        self.store.result_changed.connect(self._on_result_changed)
        self.store.params_reset.connect(self._on_params_reset)
        self.store.alert_raised.connect(self._on_alert)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_row(self, grid: QGridLayout, label: str, widget: QWidget) -> None:
        row = self._next_row()
        grid.addWidget(QLabel(label, self), row, 0)
        widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        grid.addWidget(widget, row, 1)

    def _add_spin(self, grid: QGridLayout, label: str, bounds: Bounds, *, decimals: int, suffix: str = "") -> QDoubleSpinBox:
        w = QDoubleSpinBox(self)
        w.setRange(bounds.minimum, bounds.maximum)
        w.setSingleStep(bounds.step)
        w.setDecimals(decimals)
        w.setKeyboardTracking(False)
        if suffix:
            w.setSuffix(suffix)
        self._add_row(grid, label, w)
        return w

    def _add_line_edit(self, grid: QGridLayout, label: str) -> QLineEdit:
        w = QLineEdit(self)
        w.setPlaceholderText(f"Enter {label}")
        self._add_row(grid, label, w)
        return w

    def _add_combo(self, grid: QGridLayout, label: str, items: list[str]) -> QComboBox:
        w = QComboBox(self)
        w.addItems(items)
        self._add_row(grid, label, w)
        return w

    # ---- binding ----

    def _connect_inputs(self) -> None:
        params = self.session.params
        v = self.variant

        def bind(attr: str, value: Any) -> None:
            setattr(params, attr, value)

        self.spin_primary.valueChanged.connect(lambda x: bind("primary_value", x))
        self.spin_primary.valueChanged.connect(self._update_primary_color)
        self.spin_rate.valueChanged.connect(lambda x: bind("secondary_rate", x))
        self.edit_factor_a.textChanged.connect(lambda t: bind("factor_a", t))
        self.edit_factor_b.textChanged.connect(lambda t: bind("factor_b", t))
        self.spin_iterations.valueChanged.connect(lambda n: bind("iterations", n))
        self.combo_protocol.currentTextChanged.connect(lambda t: bind("protocol", v.protocols(t)))
        self.combo_material.currentTextChanged.connect(lambda t: bind("material", v.materials(t)))
        self.spin_resonance.valueChanged.connect(lambda x: bind("resonance_frequency", x))
        self.combo_intensity.currentTextChanged.connect(lambda t: bind("intensity", v.intensity_from_label(t)))

    def _input_widgets(self) -> list[QWidget]:
        return [
            self.spin_primary, self.spin_rate, self.edit_factor_a, self.edit_factor_b,
            self.spin_iterations, self.combo_protocol, self.combo_material,
            self.spin_resonance, self.combo_intensity,
        ]

    def load_from_state(self) -> None:
        """Syncs widgets from the session's ParameterSet."""
        params = self.session.params
        widgets = self._input_widgets()
        for w in widgets:
            w.blockSignals(True)

        self.spin_primary.setValue(params.primary_value)
        self.spin_rate.setValue(params.secondary_rate)
        self.edit_factor_a.setText(params.factor_a)
        self.edit_factor_b.setText(params.factor_b)
        self.spin_iterations.setValue(params.iterations)
        self.combo_protocol.setCurrentText(params.protocol.value)
        self.combo_material.setCurrentText(params.material.value)
        self.spin_resonance.setValue(params.resonance_frequency)
        self.combo_intensity.setCurrentText(self.variant.intensity_label(params.intensity))

        for w in widgets:
            w.blockSignals(False)
        self._update_primary_color()

    def _update_primary_color(self, *_: object) -> None:
        hue = self.session.calculator.primary_hue(self.spin_primary.value())
        color = QColor.fromHsvF(hue, 0.8, 0.9)
        self.spin_primary.setStyleSheet(f"color: {color.name()};")

    # ---- slots ----

    def on_submit_clicked(self) -> None:
        try:
            self.store.submit(self.key)
        except Exception as e:
            logger.exception(f"[{self.key}] Computation failed")
            self._on_alert(self.key, self.session.alert(AlertType.ERROR, str(e)))

    def copy_results(self) -> bool:
        clipboard = QGuiApplication.clipboard()
        return self.store.copy_results(self.key, clipboard.setText)

    def _on_state_changed(self, key: str, state: str) -> None:
        if key != self.key:
            return
        busy = state == SessionState.COMPUTING
        self.btn_submit.setEnabled(not busy)
        if busy:
            self._set_status(self.variant.messages.processing, "gray")

    def _on_computation_finished(self, key: str, result: ResultRecord) -> None:
        if key != self.key:
            return
        detail = self.session.banner_detail()
        text = self.variant.messages.banner_title + (f"\n{detail}" if detail else "")
        self._set_status(text, "teal", bold=True)
        self.results_view.show_result(None)

    def _on_result_changed(self, key: str, result: ResultRecord | None) -> None:
        if key != self.key:
            return
        self._set_status("", "gray")
        self.results_view.show_result(result)

    def _on_params_reset(self, key: str) -> None:
        if key == self.key:
            self.load_from_state()

    def _on_alert(self, key: str, alert: Alert) -> None:
        if key != self.key or not self.isVisible():
            return
        box = QMessageBox(ALERT_ICONS[alert.type], alert.title, alert.message, QMessageBox.StandardButton.Ok, self)
        box.open()

    def _set_status(self, text: str, color: str, bold: bool = False) -> None:
        self.lbl_status.setText(text)
        weight = "bold" if bold else "normal"
        self.lbl_status.setStyleSheet(f"color: {color}; font-weight: {weight};")
