#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Event Form Wizard
Main entry point for the application
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from utils.logger import setup_logger


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=Config.APP_TITLE)
    parser.add_argument(
        "--user-id",
        default=Config.EVENT_OWNER_ID,
        help="Owner of the created event (default: EVENT_OWNER_ID)"
    )
    parser.add_argument(
        "--lang",
        default=Config.DEFAULT_LANGUAGE,
        choices=("fr", "en"),
        help="Interface language"
    )
    return parser.parse_args(argv)


def main():
    """Main application entry point."""
    args = parse_args()

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        from services.translation_manager import set_language
        from controllers.event_form_controller import EventFormController
        from ui.wizards.event_form import EventFormWizard

        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info(f"API: {Config.API_BASE_URL}")
        logger.info("=" * 80)

        set_language(args.lang)

        if not args.user_id:
            logger.warning("No owner id given (--user-id / EVENT_OWNER_ID); events are created without owner")

        controller = EventFormController(user_id=args.user_id)
        window = EventFormWizard(controller)
        window.wizard_completed.connect(lambda _payload: window.close())
        window.show()
        logger.info(">> Wizard displayed")

        # Run application event loop
        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
