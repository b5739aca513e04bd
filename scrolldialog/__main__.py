import argparse
import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from scrolldialog.core.logging import APP_NAME, setup_logging
from scrolldialog.core.models import ButtonSet, DialogIcon, DialogOutcome
from scrolldialog.core.settings import SettingsManager
from scrolldialog.ui.dialogs.scrolling_dialog import show
from scrolldialog.ui.managers.theme_manager import ThemeManager

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrolldialog",
        description="Show a scrolling message box. Exit code 1 means the user declined.",
    )
    parser.add_argument("message", nargs="?", default=None, help="Message text.")
    parser.add_argument(
        "-f", "--file", help="Read the message from a file ('-' for stdin)."
    )
    parser.add_argument("-c", "--caption", default="", help="Window title.")
    parser.add_argument(
        "-b",
        "--buttons",
        choices=[b.value for b in ButtonSet],
        default=ButtonSet.OK.value,
        help="Button layout.",
    )
    parser.add_argument(
        "-i",
        "--icon",
        choices=[i.value for i in DialogIcon],
        default=DialogIcon.NONE.value,
        help="Stock icon.",
    )
    parser.add_argument(
        "--theme", choices=["light", "dark", "auto"], help="Theme for this run."
    )
    parser.add_argument(
        "--enable-logging", action="store_true", help="Permanently enable debug logging."
    )
    parser.add_argument(
        "--disable-logging", action="store_true", help="Permanently disable debug logging."
    )
    return parser

def read_message(args) -> str:
    if args.file == "-":
        return sys.stdin.read()
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    return args.message or ""

def exit_code_for(outcome: DialogOutcome) -> int:
    return 1 if outcome is DialogOutcome.DECLINED else 0

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("ScrollDialog")
    app.setOrganizationName("scrolldialog")

    settings_manager = SettingsManager()

    if args.enable_logging or args.disable_logging:
        enabled = args.enable_logging
        settings_manager.save_debug_mode(enabled)
        status = "enabled" if enabled else "disabled"
        print(f"Permanent logging was {status}.")
        return 0

    session_debug = os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")
    setup_logging(debug_enabled=session_debug or settings_manager.load_debug_mode())
    main_logger = logging.getLogger(APP_NAME)

    try:
        message = read_message(args)
    except OSError as e:
        parser.error(f"cannot read {args.file}: {e}")

    theme = args.theme or settings_manager.load_theme()
    ThemeManager.get_instance().set_theme(theme, app)

    outcome = show(
        message,
        args.caption,
        ButtonSet(args.buttons),
        DialogIcon(args.icon),
    )
    main_logger.info(f"Dialog outcome: {outcome.name}")
    return exit_code_for(outcome)

if __name__ == "__main__":
    sys.exit(main())
