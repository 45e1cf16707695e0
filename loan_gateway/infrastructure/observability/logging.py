"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def mask_identity_code(identity_code: str) -> str:
    """Keep only the last four characters of a personal code"""
    return "*" * max(len(identity_code) - 4, 0) + identity_code[-4:]


def log_decision(
    request_id: str,
    identity_code: str,
    outcome: str,
    duration_ms: float,
    approved_amount: Optional[int] = None,
    approved_period: Optional[int] = None,
    level: int = logging.INFO,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.log(
        level,
        "Decision completed",
        extra={
            "request_id": request_id,
            "identity_code": mask_identity_code(identity_code),
            "step": "decision_complete",
            "outcome": outcome,
            "approved_amount": approved_amount,
            "approved_period": approved_period,
            "duration_ms": duration_ms,
        },
    )
