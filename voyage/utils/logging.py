"""Structured logging for place lookups."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class StructuredLookupLogger:
    """Structured logger for place lookup calls."""

    def log_lookup(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        ref: str | None = None,
        error_reason: str | None = None,
    ) -> None:
        """Log a lookup call with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if ref:
            log_data["ref"] = ref
        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Place lookup: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
