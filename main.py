"""
PASSMETER Main Entry Point
==========================
Logging → configuration → QApplication → password window.
"""
import sys
import os
import logging

# Hide Qt platform chatter
os.environ.setdefault("QT_LOGGING_RULES", "qt.qpa.*=false;*.debug=false")

from PySide6.QtWidgets import QApplication, QMessageBox

from core.config import get_log_level, strength_config_from_settings
from core.logging_config import LoggingConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def main():
    # 1) Logging
    LoggingConfig.setup_logging(log_level=get_log_level())

    try:
        LoggingConfig.cleanup_old_logs(days_to_keep=30)
    except OSError as exc:
        logger.warning(f"Log cleanup failed: {exc}")

    # 2) QApplication before any window
    app = QApplication(sys.argv)

    # 3) Strength rules from .env / config/settings.json
    try:
        strength_config = strength_config_from_settings()
    except ConfigurationError as exc:
        logger.error(f"Configuration error: {exc}", exc_info=True)
        QMessageBox.critical(None, "Configuration error", str(exc))
        sys.exit(1)

    # 4) Main window
    from ui.password_window import PasswordWindow
    window = PasswordWindow(config=strength_config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
