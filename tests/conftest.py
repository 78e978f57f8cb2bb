"""
Pytest configuration and fixtures for the IT glossary tests.
"""
import os
import sys

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from glossary.parsers import parse_term
from tests.fakes import FakeContentStore, NETWORK, SECURITY, make_term_item


@pytest.fixture
def category_items():
    return [SECURITY, NETWORK]


@pytest.fixture
def search_term_items():
    """Five candidates; exactly t1 and t4 are security + advanced + 暗号."""
    return [
        make_term_item('t1', '共通鍵暗号', difficulty=['advanced'],
                       search_title='共通鍵暗号/共通鍵暗号方式/symmetric key', order=1),
        make_term_item('t2', '公開鍵暗号', difficulty=['intermediate'],
                       search_title='公開鍵暗号/public key', order=2),
        make_term_item('t3', 'VPN', category=NETWORK, difficulty=['advanced'],
                       search_title='VPN/暗号化通信/virtual private network', order=3),
        make_term_item('t4', 'ハッシュ関数', difficulty=['intermediate', 'advanced'],
                       search_title='暗号学的ハッシュ関数/hash', order=4),
        make_term_item('t5', '暗号化ゲートウェイ', difficulty=['advanced'], order=5),
    ]


@pytest.fixture
def search_terms(search_term_items):
    return [parse_term(item) for item in search_term_items]


@pytest.fixture
def firewall_term_item():
    return make_term_item('fw', 'ファイアウォール', difficulty=['beginner'],
                          search_title='ファイアウォール/firewall', order=10)


@pytest.fixture
def many_term_items():
    """30 terms, enough for three pages of 12."""
    return [
        make_term_item(f'n{i:02d}', f'用語{i:02d}', category=NETWORK if i % 2 else SECURITY,
                       search_title=f'用語{i:02d}', order=i)
        for i in range(1, 31)
    ]


@pytest.fixture
def content_store(search_term_items, firewall_term_item, category_items):
    return FakeContentStore(terms=search_term_items + [firewall_term_item], categories=category_items)
