import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level"""
    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(h, "_expense_tracker", False) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._expense_tracker = True
    root.addHandler(handler)
