from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from runedrakraft.model.calculator import InfusionCalculator, ResultRecord, StabilityRating

RATING_COLORS = {
    StabilityRating.HIGH: "green",
    StabilityRating.MEDIUM: "orange",
    StabilityRating.LOW: "red",
}


class ResultsView(QGroupBox):
    """Metrics and recommendations of the live ResultRecord."""
    def __init__(self, calculator: InfusionCalculator, parent: QWidget | None = None) -> None:
        sections = calculator.variant.sections
        super().__init__(sections.results, parent)
        self.calculator = calculator

        layout = QVBoxLayout(self)

        heading = QLabel(sections.results_heading, self)
        heading.setStyleSheet("font-size: 14pt; font-weight: 600;")
        layout.addWidget(heading)

        self.form = QFormLayout()
        self._values: list[QLabel] = []
        for label in calculator.metric_labels():
            value = QLabel("-", self)
            value.setAlignment(Qt.AlignmentFlag.AlignRight)
            self.form.addRow(label, value)
            self._values.append(value)
        layout.addLayout(self.form)

        rec_title = QLabel(calculator.variant.recommendations.heading, self)
        rec_title.setStyleSheet("font-weight: bold;")
        layout.addWidget(rec_title)

        self.lbl_recommendations = QLabel("", self)
        self.lbl_recommendations.setWordWrap(True)
        self.lbl_recommendations.setStyleSheet(
            "QLabel { padding: 5px; background-color: rgba(0,0,0,10); border-radius: 3px; }"
        )
        layout.addWidget(self.lbl_recommendations)

        self.setVisible(False)

    def show_result(self, result: ResultRecord | None) -> None:
        if result is None:
            self.setVisible(False)
            return

        for value, (_, text) in zip(self._values, self.calculator.metric_rows(result)):
            value.setText(text)

        # Stability row is coloured by its rating
        rating = self.calculator.stability_rating(result.stability_index)
        self._values[1].setStyleSheet(f"color: {RATING_COLORS[rating]}; font-weight: bold;")

        bullets = self.calculator.recommendations(result)
        self.lbl_recommendations.setText("\n".join(f"• {line}" for line in bullets))
        self.setVisible(True)

