import logging

import pytest


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging() changes to the root logger after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
