import logging
from datetime import date

from logger import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_console_only(self, test_config):
        """Test that no file handler is added when file logging is off."""
        logger = setup_logging(test_config)

        assert logger is get_logger()
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0], logging.FileHandler)
        assert not test_config.log_dir.exists()

    def test_file_handler_with_dated_name(self, test_config):
        """Test that a dated log file is created in the log directory."""
        test_config.log_to_file = True

        logger = setup_logging(test_config)
        logger.info("opened")

        log_file = test_config.log_dir / f"teller-{date.today().isoformat()}.log"
        assert log_file.exists()
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_repeated_setup_replaces_handlers(self, test_config):
        """Test that calling setup twice does not duplicate handlers."""
        setup_logging(test_config)
        logger = setup_logging(test_config)

        assert len(logger.handlers) == 1
