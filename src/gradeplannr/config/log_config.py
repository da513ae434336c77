import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [course=%(course_id)s professor=%(professor_id)s] %(message)s"


class CalculatorContextFilter(logging.Filter):
    """
    Adds course_id and professor_id to every log record.
    Records logged without them get '-'.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "course_id"):
            record.course_id = "-"
        if not hasattr(record, "professor_id"):
            record.professor_id = "-"
        return True


def configure_logging(level: str = "INFO", logger_name: str = "gradeplannr") -> logging.Logger:
    logger = logging.getLogger(logger_name)
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    if not any(isinstance(f, CalculatorContextFilter) for h in logger.handlers for f in h.filters):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(CalculatorContextFilter())
        logger.addHandler(handler)

    return logger


def context(course_id: Optional[str], professor_id: Optional[str]) -> dict:
    return {"course_id": course_id or "-", "professor_id": professor_id or "-"}
