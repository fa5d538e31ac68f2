import inspect
import logging
from pprint import pformat
from typing import Any

from pydantic import BaseModel


class PprintLogger:
    """A logger wrapper that pretty-prints structured messages.

    Filter stages log dicts (counts, logins, team names) rather than
    preformatted strings; this wrapper renders them readably.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def _format_message(self, msg: Any, pprint: bool = True) -> str:
        """Format a message, optionally using pprint.

        Pydantic models (teams, tokens, results) are rendered with
        model_dump_json() when pprint=True. Other objects go through pformat,
        or str() when pprint=False.
        """
        if not pprint:
            return str(msg)

        if isinstance(msg, BaseModel):
            return msg.model_dump_json(indent=2)

        return pformat(msg, width=120, depth=None)

    def debug(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.debug(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def info(self, msg: Any, *args, pprint: bool = True, **kwargs) -> None:
        self._logger.info(self._format_message(msg, pprint=pprint), *args, stacklevel=2, **kwargs)

    def __getattr__(self, name: str) -> Any:
        """Delegate any other attributes to the underlying logger."""
        return getattr(self._logger, name)


def setup_logging(name: str | None = None, level: int = logging.INFO) -> PprintLogger:
    """Set up a named logger and return it wrapped in a PprintLogger.

    When no name is given the calling function's name is used, so a
    `self.logger = setup_logging()` in `__init__` logs as "__init__" unless the
    class passes its own name.
    """
    if name is None:
        frame = inspect.currentframe().f_back  # type: ignore[union-attr]
        name = frame.f_code.co_name  # type: ignore[union-attr]
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(pathname)s:%(lineno)d - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return PprintLogger(logger)
