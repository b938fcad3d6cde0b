import sys

from services import crash_reporter


def main():
    # Install crash logging as early as possible so silent exits are captured.
    crash_reporter.install()

    from PyQt5.QtWidgets import QApplication
    from controllers.app_controller import AppController

    app = QApplication(sys.argv)
    app.setApplicationName("Colorized")
    controller = AppController()
    controller.launch()
    rc = app.exec_()
    crash_reporter.uninstall()
    return rc


if __name__ == "__main__":
    sys.exit(main())
