import os
import sys
from importlib.metadata import PackageNotFoundError, version

__location__ = os.path.dirname(os.path.realpath(__file__))

try:
    __version__ = version("pagemodel")
except PackageNotFoundError:
    __version__ = "unknown"

if sys.version_info < (3, 8):  # pragma: no cover
    raise Exception("pagemodel requires Python 3.8+.")
