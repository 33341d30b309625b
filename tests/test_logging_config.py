import logging
from app.core.logging_config import HANDLER_NAME, LOG_FORMAT, configure_logging


def test_configure_logging_installs_one_named_handler():
    root = logging.getLogger()
    level = root.level
    try:
        configure_logging("debug")
        configure_logging("warning")
        ours = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(ours) == 1
        assert ours[0].formatter._fmt == LOG_FORMAT
        assert not hasattr(ours[0], "_genealogy")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(level)
