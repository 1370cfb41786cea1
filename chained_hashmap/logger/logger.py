from chained_hashmap.config import LOGGER_NAME
from chained_hashmap.logger.log_types import LogEvent
import json
import logging

# Same logger the CLI configures through logging.config.dictConfig
logger = logging.getLogger(LOGGER_NAME)


def log_resize_event(event: LogEvent, old_bucket_count: int, new_bucket_count: int, element_count: int):
    """Log a bucket array reallocation"""
    logger.info(json.dumps({
        "event": event,
        "old_bucket_count": old_bucket_count,
        "new_bucket_count": new_bucket_count,
        "element_count": element_count
    }))


def log_invalid_key_event(operation: str, key):
    """Log a rejected key"""
    logger.error(json.dumps({
        "event": LogEvent.INVALID_KEY,
        "operation": operation,
        "key": repr(key)
    }))


def log_demo_event(event: LogEvent, memory_mb: float, size: int = None, bucket_count: int = None):
    """Log a demo stage (with optional table stats)"""
    log_data = {
        "event": event,
        "memory_mb": round(memory_mb, 2)
    }
    if size is not None:
        log_data["size"] = size
    if bucket_count is not None:
        log_data["bucket_count"] = bucket_count

    logger.info(json.dumps(log_data))
