import logging, os

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_HANDLER_NAME = "gpa_tools.console"
_DEFAULT_LEVEL = os.getenv("GPA_LOG_LEVEL", "INFO").upper()


def setup_logging():
    level = getattr(logging, _DEFAULT_LEVEL, logging.INFO)

    # Main app logger
    logger = logging.getLogger("gpa_tools")
    logger.setLevel(level)

    # Streamlit reruns the script on every interaction; add the handler once
    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.set_name(CONSOLE_HANDLER_NAME)
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        ch.setLevel(level)
        logger.addHandler(ch)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = logging.getLogger("gpa_tools")
    return base.getChild(name) if name else base
