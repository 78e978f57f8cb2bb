"""
Unit tests for utils/masking.py
"""
import os
import sys
import pytest

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from utils.masking import mask_full, mask_headers, mask_partial, mask_url


class TestMaskFull:
    def test_value(self):
        assert mask_full('secret') == '********'

    @pytest.mark.parametrize('value', [None, ''])
    def test_empty(self, value):
        assert mask_full(value) == 'None'


class TestMaskPartial:
    @pytest.mark.parametrize('value,expected', [
        ('my-glossary', 'my*******ry'),
        ('docs', 'd**s'),
        ('abc', 'a*c'),
        ('ab', '**'),
        (None, 'None'),
    ])
    def test_examples(self, value, expected):
        assert mask_partial(value) == expected

    def test_keeps_length(self):
        assert len(mask_partial('it-glossary-prod')) == len('it-glossary-prod')


class TestMaskHeaders:
    def test_api_key_masked(self):
        headers = {'X-MICROCMS-API-KEY': 'abc123', 'Accept': 'application/json'}
        masked = mask_headers(headers)

        assert masked == {'X-MICROCMS-API-KEY': '********', 'Accept': 'application/json'}
        assert headers['X-MICROCMS-API-KEY'] == 'abc123'

    def test_empty(self):
        assert mask_headers(None) == {}


class TestMaskUrl:
    def test_host_masked(self):
        assert mask_url('https://abc.io/api/v1') == 'https://ab**io/api/v1'

    def test_not_a_url(self):
        assert mask_url('glossary') == 'gl****ry'

    def test_empty(self):
        assert mask_url('') == 'None'
