"""
Unit tests for utils/logging_config.py functions.
"""
import os
import sys
import pytest
import logging
import tempfile
import shutil
from unittest.mock import patch, MagicMock

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from utils.logging_config import setup_logging


@pytest.fixture(autouse=True)
def no_config_module():
    """Run every test as if config.py did not exist."""
    with patch.dict(sys.modules, {'config': None}):
        yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)


class TestSetupLogging:
    """Test cases for setup_logging function."""

    def test_setup_logging_default(self):
        logger = setup_logging()

        assert isinstance(logger, logging.Logger)
        assert logger.level == logging.INFO

    @pytest.mark.parametrize('level,expected', [
        ('DEBUG', logging.DEBUG),
        ('warning', logging.WARNING),
        ('ERROR', logging.ERROR),
        ('INVALID', logging.INFO),
    ])
    def test_setup_logging_levels(self, level, expected):
        assert setup_logging(log_level=level).level == expected

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_setup_logging_with_file(self):
        temp_dir = tempfile.mkdtemp()
        log_file = os.path.join(temp_dir, 'nested', 'glossary.log')

        try:
            logger = setup_logging(log_file=log_file)
            logger.info("Test message")
            for handler in logger.handlers:
                handler.flush()

            assert os.path.exists(log_file)
            with open(log_file, 'r', encoding='utf-8') as f:
                assert 'Test message' in f.read()
        finally:
            for handler in logging.getLogger().handlers[:]:
                handler.close()
                logging.getLogger().removeHandler(handler)
            shutil.rmtree(temp_dir, ignore_errors=True)

    def test_setup_logging_reads_config_module(self):
        fake_config = MagicMock(spec=['LOG_LEVEL'])
        fake_config.LOG_LEVEL = 'DEBUG'
        with patch.dict(sys.modules, {'config': fake_config}):
            logger = setup_logging()

        assert logger.level == logging.DEBUG

    def test_urllib3_quietened(self):
        setup_logging(log_level='DEBUG')

        assert logging.getLogger('urllib3').level == logging.WARNING
