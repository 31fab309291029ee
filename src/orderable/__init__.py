import logging


# read version from installed package
from importlib.metadata import version
__version__ = version("orderable")


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
