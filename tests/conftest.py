import logging

import pytest


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.WARNING)
