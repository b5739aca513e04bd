import logging
import os
import sys

APP_NAME = "ScrollDialog"
DEBUG_ENV_VAR = "SCROLLDIALOG_DEBUG"
LOG_FORMAT = "%(asctime)s - [%(levelname)s] - (%(filename)s:%(lineno)d) - %(message)s"

def get_log_directory(app_name: str = APP_NAME) -> str:
    """
    Get the log directory for the application on the current platform.

    Args:
        app_name: Name of the application, used as the directory name

    Returns:
        str: Path to the log directory
    """
    logger = logging.getLogger(app_name)

    if sys.platform == "win32":
        app_data_dir = os.getenv("APPDATA")
        if not app_data_dir:
            app_data_dir = os.path.expanduser("~")
            logger.warning(
                "Could not find APPDATA env variable, falling back to home directory."
            )
        return os.path.join(app_data_dir, app_name)

    elif sys.platform == "darwin":
        return os.path.join(
            os.path.expanduser("~/Library/Application Support"), app_name
        )

    else:
        xdg_data_home = os.getenv("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
        return os.path.join(xdg_data_home, app_name)

def _debug_from_env(debug_env_var: str, debug_enabled: bool) -> bool:
    suppress_var = debug_env_var.replace("_DEBUG", "_SUPPRESS_DEBUG")
    if os.getenv(suppress_var, "0") == "1":
        return False
    if os.getenv(debug_env_var, "0") == "1":
        return True
    return debug_enabled

def setup_logging(
    app_name: str = APP_NAME,
    debug_enabled: bool = False,
    debug_env_var: str = DEBUG_ENV_VAR,
    log_to_file: bool = True,
):
    """
    Configure the application logger.

    Adds a stdout handler and, when log_to_file is set, a log.txt handler in
    the platform log directory. Calling it again only updates the level.

    Args:
        app_name: Logger name shared by every module of the package
        debug_enabled: Whether to enable debug logging
        debug_env_var: Environment variable that forces debug on ("1");
            the matching *_SUPPRESS_DEBUG variable forces it off
        log_to_file: Whether to also write log.txt
    """
    logger = logging.getLogger(app_name)

    if debug_env_var:
        debug_enabled = _debug_from_env(debug_env_var, debug_enabled)

    level = logging.DEBUG if debug_enabled else logging.INFO

    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(level)
    logger.addHandler(stream_handler)

    if not log_to_file:
        return logger

    try:
        log_dir = get_log_directory(app_name)
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, "log.txt")

        file_handler = logging.FileHandler(log_file_path, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    except OSError:
        logger.error(
            "Failed to set up file logger. Continuing with console-only logging.",
            exc_info=True,
        )

    return logger
