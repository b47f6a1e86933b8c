import logging


LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    root.setLevel(level.upper())
