import logging

logger = logging.getLogger("rundeckjob")


class LogColors:
    PURPLE = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"
    UNDERLINE = "\033[4m"


def setup_logger(debug=False):
    """
    Configure logging for the command line. Library use leaves it alone.
    """
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logger.setLevel(level)
    return logger


def color(text, code):
    return f"{code}{text}{LogColors.ENDC}"
