"""
Unit tests for scripts/health_check.py functions.
"""
import os
import sys
import pytest
from unittest.mock import patch, MagicMock

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from scripts.health_check import check_content_api, main
from utils.request_handler import RemoteUnavailable, RequestConfig


def _handler(payload=None, error=None, **config_kwargs):
    config_kwargs.setdefault('service_domain', 'it-glossary')
    handler = MagicMock()
    handler.config = RequestConfig(**config_kwargs)
    if error is not None:
        handler.get_json.side_effect = error
    else:
        handler.get_json.return_value = payload
    return handler


class TestCheckContentApi:
    def test_success(self, category_items):
        handler = _handler({'contents': category_items[:1], 'totalCount': 2, 'offset': 0, 'limit': 1})

        ok, message = check_content_api(handler)

        assert ok is True
        assert '2 categories' in message
        handler.get_json.assert_called_once_with('categories', params={'limit': 1})

    def test_unreachable(self):
        ok, message = check_content_api(_handler(error=RemoteUnavailable('refused')))

        assert ok is False
        assert 'refused' in message

    def test_malformed_payload(self):
        ok, _ = check_content_api(_handler({'unexpected': True}))

        assert ok is False

    def test_not_configured(self):
        handler = _handler({}, service_domain='')

        ok, message = check_content_api(handler)

        assert ok is False
        assert 'CMS_SERVICE_DOMAIN' in message
        handler.get_json.assert_not_called()


class TestMain:
    @patch('scripts.health_check.setup_logging')
    @patch('scripts.health_check.create_request_handler_from_config')
    def test_exit_codes(self, mock_create, mock_setup, category_items):
        mock_create.return_value = _handler({'contents': category_items, 'totalCount': 2})
        assert main([]) == 0

        mock_create.return_value = _handler(error=RemoteUnavailable('down'))
        assert main([]) == 1

    @patch('scripts.health_check.setup_logging')
    @patch('scripts.health_check.create_request_handler_from_config')
    def test_timeout_flag(self, mock_create, mock_setup, category_items):
        mock_create.return_value = _handler({'contents': [], 'totalCount': 0})

        main(['--timeout', '2.5'])

        mock_create.assert_called_once_with(max_retries=1, timeout=2.5)
