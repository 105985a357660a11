import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core.config import load_settings
from BackEnd.core.log import configure_logging
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    timer_service = TimerService(settings=settings)
    win = MainWindow(timer_service)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
