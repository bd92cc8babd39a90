# emoji_registry/utils/__init__.py
# logging, configuration and thread helpers shared by the package

from .logger_utils import Log, log, configure_logging
from .config_manager import Config, DEFAULTS
from .threaded_runner import run_parallel

__all__ = ["Log", "log", "configure_logging", "Config", "DEFAULTS", "run_parallel"]
