"""Example: routing stdlib logging calls through slogpy.

Run with:
    python examples/stdlib_bridge.py
"""

import logging
from datetime import timedelta

from slogpy import ConsoleSink, FormatterConfig, LogfmtFormatter, SlogHandler

handler = SlogHandler(
    LogfmtFormatter(FormatterConfig(strict=True)),
    ConsoleSink(),
    include_attrs=["module"],
)
logging.basicConfig(level=logging.INFO, handlers=[handler])

logger = logging.getLogger("orders")

logger.info(
    "order placed",
    extra={"order": {"id": 42, "total": 19.99}, "took": timedelta(microseconds=850)},
)
logger.warning("stock low", extra={"sku": "A-1", "remaining": 2})

try:
    1 / 0
except ZeroDivisionError:
    logger.exception("pricing failed")
