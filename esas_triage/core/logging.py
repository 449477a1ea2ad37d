"""Structured logging configuration."""

import logging
import sys

from esas_triage.core.config import settings


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured log output."""

    EXTRA_FIELDS = ("request_id", "screening_type", "risk_level", "primary_symptom_id")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field_name in self.EXTRA_FIELDS:
            if hasattr(record, field_name):
                log_data[field_name] = getattr(record, field_name)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Simple key=value format for readability
        parts = [f"{k}={v}" for k, v in log_data.items()]
        return " ".join(parts)


def setup_logging() -> None:
    """Configure application logging."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    if settings.is_dev:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = StructuredFormatter()

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)


class ScreeningAuditLogger:
    """Logger for completed screening decisions.

    One line per screening, stamped with the knowledge base version and hash
    so a decision can be traced back to the exact tables that produced it.
    """

    def __init__(self) -> None:
        self.logger = get_logger("audit.screening")

    def log(
        self,
        screening_type: str,
        primary_symptom_id: int,
        highest_score: int,
        risk_level: str,
        knowledge_base_version: str,
        knowledge_base_hash: str,
    ) -> None:
        """Log a screening decision."""
        self.logger.info(
            f"AUDIT: action=screening_evaluated type={screening_type} "
            f"primary={primary_symptom_id} highest={highest_score} "
            f"risk={risk_level} kb={knowledge_base_version}:{knowledge_base_hash[:12]}",
            extra={
                "screening_type": screening_type,
                "risk_level": risk_level,
                "primary_symptom_id": primary_symptom_id,
            },
        )


screening_audit_logger = ScreeningAuditLogger()
