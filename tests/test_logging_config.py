# tests/test_logging_config.py
import logging
import sys

from feishu_notify.logging_config import setup_logging


def test_setup_logging_installs_single_stdout_handler():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        setup_logging()
        setup_logging()  # 두 번 불러도 핸들러는 하나

        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout
        assert handler.formatter._fmt == '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        assert root.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
