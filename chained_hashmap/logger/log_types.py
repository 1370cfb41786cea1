from enum import Enum


class LogEvent(str, Enum):
    TABLE_GREW = "table_grew"
    TABLE_SHRANK = "table_shrank"
    INVALID_KEY = "invalid_key"
    DEMO_STARTED = "demo_started"
    DEMO_FINISHED = "demo_finished"
    LINES_COUNTED = "lines_counted"
