import logging

import pytest


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop handlers installed by setup_logging so runs do not leak into each other."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
