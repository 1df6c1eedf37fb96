from .colored_logger import logger, set_level

__all__ = ["logger", "set_level"]
