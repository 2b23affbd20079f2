"""
Password Window - PASSMETER

Top-level window: a dark backdrop with a white card that hosts the
PasswordStrengthWidget.
"""
import logging
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QFrame

from ui.widgets.password_strength_widget import PasswordStrengthWidget
from utils.password_utils import StrengthConfig, StrengthResult
from version import APP_NAME, VERSION

logger = logging.getLogger(__name__)


class PasswordWindow(QWidget):

    def __init__(self, config: Optional[StrengthConfig] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{APP_NAME} {VERSION}")
        self.setMinimumWidth(380)
        self.setStyleSheet("background-color: #1a1a1a;")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        card = QFrame()
        card.setObjectName("card")
        card.setStyleSheet("QFrame#card { background-color: #fff; border-radius: 12px; }")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(0, 0, 0, 0)

        self.strength_widget = PasswordStrengthWidget(
            config=config,
            on_strength_change=self._on_strength_change,
        )
        self.strength_widget.edit_password.setStyleSheet(
            "background-color: #f5f5f5; border-radius: 8px; padding: 12px; color: #000;"
        )
        card_layout.addWidget(self.strength_widget)
        layout.addWidget(card)

    def _on_strength_change(self, result: StrengthResult):
        logger.info(f"Strength changed: {result.level.value} ({result.score}/{result.max_score})")
