"""
PasswordStrengthWidget - PASSMETER
==================================

Masked password field with live strength feedback.
- Every edit goes through PasswordInputGate (max 25 ASCII characters)
- Strength label colored by level
- One bullet per feedback hint, or a placeholder prompt
- Checklist of all seven criteria with an active/inactive dot

Every recomputed StrengthResult is emitted on ``strength_changed`` and passed
to the optional ``on_strength_change`` callable, including the result for the
empty password computed at construction.
"""
import logging
from typing import Callable, List, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QFrame,
)
from PySide6.QtCore import Qt, Signal

from constants import LevelColors
from ui.strength_presenter import (
    checklist_rows, criterion_label, feedback_lines, level_color, strength_caption,
)
from utils.input_filter import PasswordInputGate
from utils.password_utils import (
    Criterion, StrengthConfig, StrengthResult, evaluate_password,
)

logger = logging.getLogger(__name__)

StrengthCallback = Callable[[StrengthResult], None]


class _CriterionRow(QWidget):
    """Dot + label line in the checklist."""

    def __init__(self, key: str, label: str, parent=None):
        super().__init__(parent)
        self.key = key
        self.setObjectName(f"feedback-{key}")

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(8)

        self.indicator = QLabel()
        self.indicator.setFixedSize(12, 12)
        lay.addWidget(self.indicator)

        self.label = QLabel(label)
        self.label.setStyleSheet("color: #000; font-size: 14px;")
        lay.addWidget(self.label)
        lay.addStretch()

        self.set_active(False)

    def set_active(self, active: bool):
        color = LevelColors.INDICATOR_ACTIVE if active else LevelColors.INDICATOR_INACTIVE
        self.indicator.setProperty("active", active)
        self.indicator.setStyleSheet(f"background: {color}; border-radius: 6px;")

    def is_active(self) -> bool:
        return bool(self.indicator.property("active"))


class PasswordStrengthWidget(QWidget):

    strength_changed = Signal(object)

    def __init__(
        self,
        config: Optional[StrengthConfig] = None,
        on_strength_change: Optional[StrengthCallback] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config or StrengthConfig()
        self._on_strength_change = on_strength_change
        self._gate = PasswordInputGate()
        self._strength: Optional[StrengthResult] = None
        self._feedback_labels: List[QLabel] = []
        self._rows = {}

        self.init_ui()
        self._recompute()

    # --------- UI ---------

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        layout.setContentsMargins(16, 16, 16, 16)

        self.lbl_password = QLabel("Password")
        self.lbl_password.setStyleSheet("font-size: 15px; font-weight: bold; color: #000;")
        layout.addWidget(self.lbl_password)

        self.edit_password = QLineEdit()
        self.edit_password.setObjectName("password-input")
        self.edit_password.setEchoMode(QLineEdit.Password)
        self.edit_password.setPlaceholderText("Enter password")
        # No setMaxLength: over-long input must be rejected whole, not cut short
        self.edit_password.textEdited.connect(self._on_text_edited)
        layout.addWidget(self.edit_password)

        self.lbl_strength = QLabel()
        self.lbl_strength.setObjectName("strength-text")
        layout.addWidget(self.lbl_strength)

        sep = QFrame()
        sep.setFrameShape(QFrame.HLine)
        sep.setObjectName("separator")
        layout.addWidget(sep)

        self.feedback_box = QVBoxLayout()
        self.feedback_box.setSpacing(4)
        layout.addLayout(self.feedback_box)

        self.criteria_box = QVBoxLayout()
        self.criteria_box.setSpacing(6)
        for criterion in Criterion:
            widget = _CriterionRow(criterion.value, criterion_label(criterion, self._config), self)
            self._rows[criterion.value] = widget
            self.criteria_box.addWidget(widget)
        layout.addLayout(self.criteria_box)
        layout.addStretch()

    # --------- Public API ---------

    def config(self) -> StrengthConfig:
        return self._config

    def password(self) -> str:
        return self._gate.value

    def strength(self) -> StrengthResult:
        return self._strength

    def set_on_strength_change(self, callback: Optional[StrengthCallback]):
        self._on_strength_change = callback

    def set_password(self, candidate: str) -> bool:
        """
        Offer a new password value.

        Rejected candidates leave the current value, the field text and the
        last result untouched. An accepted value equal to the current one does
        not trigger a new evaluation.
        """
        previous = self._gate.value
        if not self._gate.offer(candidate):
            self._restore_field()
            return False

        if self.edit_password.text() != candidate:
            self.edit_password.blockSignals(True)
            self.edit_password.setText(candidate)
            self.edit_password.blockSignals(False)

        if candidate != previous:
            self._recompute()
        return True

    def criterion_active(self, key: str) -> bool:
        return self._rows[key].is_active()

    def criterion_label(self, key: str) -> str:
        return self._rows[key].label.text()

    def feedback_texts(self) -> List[str]:
        return [lbl.text() for lbl in self._feedback_labels]

    # --------- Internals ---------

    def _on_text_edited(self, text: str):
        self.set_password(text)

    def _restore_field(self):
        cursor = min(self.edit_password.cursorPosition(), len(self._gate.value))
        self.edit_password.blockSignals(True)
        self.edit_password.setText(self._gate.value)
        self.edit_password.setCursorPosition(cursor)
        self.edit_password.blockSignals(False)

    def _recompute(self):
        result = evaluate_password(self._gate.value, self._config)
        self._strength = result
        self._render(result)

        self.strength_changed.emit(result)
        if self._on_strength_change is not None:
            self._on_strength_change(result)

    def _render(self, result: StrengthResult):
        self.lbl_strength.setText(strength_caption(result))
        self.lbl_strength.setStyleSheet(
            f"color: {level_color(result.level)}; font-size: 16px; font-weight: bold;"
        )

        for lbl in self._feedback_labels:
            self.feedback_box.removeWidget(lbl)
            lbl.deleteLater()
        self._feedback_labels = []

        for idx, line in enumerate(feedback_lines(result)):
            lbl = QLabel(f"• {line}")
            lbl.setObjectName(f"feedback-hint-{idx}")
            lbl.setStyleSheet("color: #555; font-size: 14px;")
            lbl.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
            self.feedback_box.addWidget(lbl)
            self._feedback_labels.append(lbl)

        for row in checklist_rows(result, self._config):
            self._rows[row.key].set_active(row.active)
