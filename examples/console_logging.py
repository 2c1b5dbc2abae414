"""Example: one logger handle, three output formats.

Run with:
    python examples/console_logging.py
"""

from datetime import timedelta

from slogpy import (
    ConsoleSink,
    DurationAttr,
    FormatterConfig,
    IntAttr,
    JsonFormatter,
    Level,
    LogfmtFormatter,
    Logger,
    StringAttr,
    TerminalFormatter,
)


def main() -> None:
    config = FormatterConfig().with_strict(True).with_sort_order(["time", "level"])
    sink = ConsoleSink()

    for formatter in (
        JsonFormatter(config),
        LogfmtFormatter(config),
        TerminalFormatter(config.with_terminal_max_width(80)),
    ):
        log = Logger(formatter, sink, level=Level.DEBUG).with_attrs(
            StringAttr("service", "frobulator")
        )
        request = log.with_group(
            "req", StringAttr("method", "GET"), StringAttr("path", "/orders")
        )
        request.info(
            "request served",
            IntAttr("status", 200),
            DurationAttr.from_timedelta("took", timedelta(milliseconds=12)),
        )
        request.debug("cache miss", StringAttr("key", "orders:42"))
        log.error("something went wrong", IntAttr("retries", 99))


if __name__ == "__main__":
    main()
