import os

LOGGER_NAME = 'chained_hashmap'

# Check if we're in test mode
IS_TESTING = os.getenv("TESTING", "false").lower() == "true"

LOG_LEVEL = os.getenv("HASHMAP_LOG_LEVEL", "INFO").upper()

# Table defaults
MINIMUM_SIZE = 3
MAXIMUM_LOAD_FACTOR = 0.8
MINIMUM_LOAD_FACTOR = 0.2
RESIZE_FACTOR = 2
DEFAULT_HASH = "fnv1a"

TEST_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(levelname)s - %(message)s',
        }
    },
    'handlers': {
        'null': {
            'class': 'logging.NullHandler',
            'level': 'DEBUG'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'DEBUG',
            'handlers': ['null'],  # Use null handler to suppress logs during tests
            'propagate': False
        }
    }
}

CONSOLE_LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': LOG_LEVEL,
            'formatter': 'simple',
            'stream': 'ext://sys.stderr'
        }
    },
    'loggers': {
        LOGGER_NAME: {
            'level': 'DEBUG',
            'handlers': ['console'],
            'propagate': False
        }
    }
}

LOGGING = TEST_LOGGING if IS_TESTING else CONSOLE_LOGGING
