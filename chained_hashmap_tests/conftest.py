import pytest
import os
from unittest.mock import patch, MagicMock

os.environ.setdefault('TESTING', 'true')

from chained_hashmap.HashMap import HashMap


@pytest.fixture
def table():
    return HashMap()


@pytest.fixture(autouse=True)
def mock_logger():
    with patch('chained_hashmap.logger.logger.logger') as mock_logger:
        mock_logger.info = MagicMock()
        mock_logger.error = MagicMock()
        yield mock_logger


@pytest.fixture
def sample_items():
    return {
        "Rodrigo": {"isAdmin": True},
        "alice": 1,
        "bob": [1, 2, 3],
        "carol": None,
        "Dave": "x",
        "dave": "y",
        "eve": 0,
        "mallory": {"nested": {"list": [1, 2]}},
    }


@pytest.fixture
def invalid_keys():
    return ["", None, 123, 1.5, b"bytes", ["list"], ("tuple",), True]
