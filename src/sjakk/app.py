"""Qt application entry point."""

from __future__ import annotations

import sys

from sjakk.settings import AppSettings


def run_application(
    settings: AppSettings | None = None, argv: list[str] | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from sjakk.ui.main_window import MainWindow
    from sjakk.ui.theme import APP_STYLE

    settings = settings if settings is not None else AppSettings()
    settings.apply()

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Sjakk")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    window = MainWindow(settings)
    window.show()

    return app.exec()


def main() -> None:
    """Launch the sjakk window."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
