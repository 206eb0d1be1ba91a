import datetime
import sys
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from forumkit.utils.settings import settings


class ConsoleLogger:
    def __init__(
        self,
        debug_enabled: bool = True,
        trace_enabled: bool = False,
        time_zone: ZoneInfo | None = None,
        date_format: str | None = None,
    ) -> None:
        self.debug_enabled = debug_enabled
        self.trace_enabled = trace_enabled
        self.time_zone = time_zone or ZoneInfo("UTC")
        self.date_format = date_format or "%Y-%m-%d %H:%M:%S"

    def _log(self, level: str, message: str | None, level_color: str | None = None) -> None:
        timestamp = datetime.datetime.now(tz=self.time_zone).strftime(self.date_format)
        reset_code = "\033[0m"
        level_code = f"\033[{level_color}m" if level_color else "\033[37m"
        print(f"\033[37;2m{timestamp}{reset_code} {level_code}{level.ljust(8)}{reset_code} {message}", file=sys.stdout)

    def trace(self, message: str | None) -> None:
        if self.trace_enabled:
            self._log("TRACE", message, level_color="90")

    def info(self, message: str | None) -> None:
        self._log("INFO", message, level_color="34;1")

    def debug(self, message: str | None) -> None:
        if self.debug_enabled:
            self._log("DEBUG", message, level_color="93")

    def warning(self, message: str | None) -> None:
        self._log("WARN", message, level_color="91")

    def error(self, message: str | None) -> None:
        self._log("CRIT", message, level_color="91;1")

    # log complete settings dump loaded from environment
    def log_settings(self, settings: BaseSettings) -> None:
        self.debug("Loaded configuration...")

        fields = settings.__class__.model_fields.keys()
        values = {field: getattr(settings, field) for field in fields}
        max_len = max((len(name) for name in fields), default=0)

        for name, value in values.items():
            label = f'"{name}"'.ljust(max_len + 2)
            self.debug(f'- {label} = "{value}"')


logger = ConsoleLogger(
    debug_enabled=settings.debug_mode,
    trace_enabled=settings.trace_mode,
    time_zone=settings.log_time_zone,
    date_format=settings.log_date_format,
)
