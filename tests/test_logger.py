"""
test_logger.py

Tests for logger configuration.
"""

import logging
from unittest.mock import Mock, patch

from confluxscan.utils.logger import LOG_FORMAT, get_logger


def _config(level="INFO", log_file=""):
    config = Mock()
    config.LOG_LEVEL = level
    config.LOG_FILE = log_file
    return config


class TestGetLogger:
    """Tests for get_logger()"""

    @patch('confluxscan.utils.logger.get_config')
    def test_console_handler_only_by_default(self, mock_get_config):
        mock_get_config.return_value = _config(level="DEBUG")

        logger = get_logger("confluxscan.tests.console")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    @patch('confluxscan.utils.logger.get_config')
    def test_no_duplicate_handlers(self, mock_get_config):
        mock_get_config.return_value = _config()

        get_logger("confluxscan.tests.repeat")
        logger = get_logger("confluxscan.tests.repeat")

        assert len(logger.handlers) == 1

    @patch('confluxscan.utils.logger.get_config')
    def test_file_handler_when_log_file_set(self, mock_get_config, tmp_path):
        log_file = tmp_path / "logs" / "client.log"
        mock_get_config.return_value = _config(log_file=str(log_file))

        logger = get_logger("confluxscan.tests.file")
        try:
            assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
            assert log_file.parent.exists()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    @patch('confluxscan.utils.logger.get_config')
    def test_unknown_level_falls_back_to_info(self, mock_get_config):
        mock_get_config.return_value = _config(level="VERBOSE")

        assert get_logger("confluxscan.tests.level").level == logging.INFO
