#!/usr/bin/env python3
"""
Health Check Script for the IT Glossary API

Verifies, before the API server is started, that the content API is
reachable with the configured service domain and API key and that it
answers with a well-formed category list.

Usage:
    python3 scripts/health_check.py [--timeout SECONDS]

Exit codes:
    0: Content API reachable and answering with valid data
    1: Content API unreachable, rejecting the key, or returning bad data
"""

import os
import sys
import argparse
import logging
from typing import Tuple

# Make project packages importable when run as a script
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from glossary.fetcher import CATEGORIES_ENDPOINT
from glossary.parsers import parse_category_list
from utils.logging_config import setup_logging
from utils.masking import mask_url
from utils.request_handler import RemoteUnavailable, RequestHandler, create_request_handler_from_config

logger = logging.getLogger(__name__)


def check_content_api(handler: RequestHandler) -> Tuple[bool, str]:
    """
    Ask the content API for a single category.

    Returns:
        Tuple of (success, message)
    """
    masked_url = mask_url(handler.config.api_base_url)
    logger.info(f"Testing content API at {masked_url}...")

    if not (handler.config.service_domain or handler.config.base_url):
        return False, "CMS_SERVICE_DOMAIN is not configured"

    try:
        payload = handler.get_json(CATEGORIES_ENDPOINT, params={'limit': 1})
        categories = parse_category_list(payload)
    except RemoteUnavailable as e:
        return False, f"Content API unavailable: {e}"

    total = payload.get('totalCount', len(categories))
    return True, f"Connected successfully ({total} categories)"


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description='Pre-flight check for the content API')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Request timeout in seconds (default: REQUEST_TIMEOUT from config.py)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)
    setup_logging()

    overrides = {'max_retries': 1}
    if args.timeout is not None:
        overrides['timeout'] = args.timeout
    handler = create_request_handler_from_config(**overrides)

    ok, message = check_content_api(handler)
    if ok:
        logger.info(f"✓ Content API: {message}")
        return 0
    logger.error(f"✗ Content API: {message}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
