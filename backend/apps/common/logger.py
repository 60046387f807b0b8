import logging
from typing import Any, Dict, Mapping, Optional


class AppLogger:
    """Stdlib logger wrapper that carries bound key/value context into every record."""

    def __init__(
        self,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context: Dict[str, Any] = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        """Return a new logger with ``extra`` merged over the current context."""
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at error level and attach the exception currently being handled."""
        self._log(logging.ERROR, message, context, exc_info=True)

    def _log(
        self,
        level: int,
        message: str,
        context: Dict[str, Any],
        exc_info: bool = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload = {**self._context, **context}
        self._logger.log(level, self.render(message, payload), exc_info=exc_info)

    @staticmethod
    def render(message: str, context: Mapping[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(f"{key}={_stringify(value)}" for key, value in context.items())
        return f"{message} | {pairs}"


def _stringify(value: Any) -> str:
    if value is None or isinstance(value, (str, int, float, bool)):
        return str(value)
    return repr(value)


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)
