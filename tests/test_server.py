"""
Tests for the FastAPI REST layer (glossary.server).
"""
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest
from fastapi.testclient import TestClient

from glossary.fetcher import ResultFetcher
from glossary.server import UNAVAILABLE_DETAIL, app, get_fetcher
from tests.fakes import FakeContentStore
from utils.request_handler import RemoteUnavailable


class DownStore:
    def get_json(self, endpoint, params=None):
        raise RemoteUnavailable('connection refused')


@pytest.fixture
def client_for():
    def _make(store):
        app.dependency_overrides[get_fetcher] = lambda: ResultFetcher(store)
        return TestClient(app)
    yield _make
    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client_for, content_store):
        response = client_for(content_store).get('/api/health')
        assert response.status_code == 200
        assert response.json()['status'] == 'ok'


class TestListTerms:
    def test_unfiltered(self, client_for, content_store):
        response = client_for(content_store).get('/api/terms')
        assert response.status_code == 200
        data = response.json()
        assert data['total_count'] == 6
        assert [t['id'] for t in data['terms']] == ['t1', 't2', 't3', 't4', 't5', 'fw']
        assert len(data['categories']) == 2
        assert data['no_matches'] is None

    def test_filtered(self, client_for, content_store):
        response = client_for(content_store).get(
            '/api/terms', params={'category': 'security', 'difficulty': 'advanced', 'q': '暗号'}
        )
        data = response.json()
        assert [t['id'] for t in data['terms']] == ['t1', 't4']
        assert data['criteria'] == {
            'category': 'security', 'difficulty': 'advanced', 'query': '暗号', 'page': 1,
        }
        assert data['terms'][0]['difficulty_label'] == '上級'

    def test_pagination_links(self, client_for, many_term_items, category_items):
        store = FakeContentStore(terms=many_term_items, categories=category_items)
        data = client_for(store).get('/api/terms', params={'page': '2', 'difficulty': 'beginner'}).json()
        pagination = data['pagination']
        assert pagination['current_page'] == 2
        assert pagination['total_pages'] == 3
        assert pagination['previous']['href'] == '/terms?page=1&difficulty=beginner'
        assert pagination['next']['href'] == '/terms?page=3&difficulty=beginner'

    def test_bad_page_param_falls_back(self, client_for, content_store):
        data = client_for(content_store).get('/api/terms', params={'page': 'abc'}).json()
        assert data['criteria']['page'] == 1

    def test_no_matches(self, client_for, content_store):
        data = client_for(content_store).get('/api/terms', params={'q': 'zzz'}).json()
        assert data['terms'] == []
        assert data['no_matches']['view_all_href'] == '/terms'

    def test_bracket_in_query_is_422(self, client_for, content_store):
        response = client_for(content_store).get('/api/terms', params={'q': 'x[and]slug[equals]fw'})
        assert response.status_code == 422
        assert not any(endpoint == 'terms' for endpoint, _ in content_store.calls)

    def test_remote_unavailable_is_503(self, client_for):
        response = client_for(DownStore()).get('/api/terms')
        assert response.status_code == 503
        assert response.json()['detail'] == UNAVAILABLE_DETAIL


class TestTermDetail:
    def test_found(self, client_for, content_store):
        response = client_for(content_store).get('/api/terms/fw')
        assert response.status_code == 200
        data = response.json()
        assert data['title'] == 'ファイアウォール'
        assert data['search_title'] == 'ファイアウォール/firewall'

    def test_not_found(self, client_for, content_store):
        assert client_for(content_store).get('/api/terms/nope').status_code == 404

    def test_bracket_slug_not_found(self, client_for, content_store):
        assert client_for(content_store).get('/api/terms/fw[and]x').status_code == 404
        assert content_store.calls == []


class TestCategories:
    def test_list(self, client_for, content_store):
        data = client_for(content_store).get('/api/categories').json()
        assert [c['slug'] for c in data['categories']] == ['security', 'network']

    def test_detail(self, client_for, content_store):
        data = client_for(content_store).get('/api/categories/network').json()
        assert data['category']['id'] == 'network'
        assert [t['id'] for t in data['terms']] == ['t3']

    def test_detail_not_found(self, client_for, content_store):
        assert client_for(content_store).get('/api/categories/nope').status_code == 404

    def test_unavailable(self, client_for):
        assert client_for(DownStore()).get('/api/categories').status_code == 503


class TestRefine:
    def test_refine_loaded_batch(self, client_for, content_store, search_term_items):
        response = client_for(content_store).post('/api/refine', json={
            'terms': search_term_items,
            'category': 'security',
            'difficulty': 'advanced',
            'q': '暗号',
        })
        assert response.status_code == 200
        data = response.json()
        assert [t['id'] for t in data['terms']] == ['t1', 't4']
        assert data['total_count'] == 2
        # nothing is fetched for an in-memory refinement
        assert content_store.calls == []

    def test_refine_no_match(self, client_for, content_store, search_term_items):
        data = client_for(content_store).post('/api/refine', json={
            'terms': search_term_items, 'q': 'trojan',
        }).json()
        assert data['terms'] == []
        assert data['no_matches'] is not None

    def test_refine_malformed_entry(self, client_for, content_store):
        response = client_for(content_store).post('/api/refine', json={'terms': [{'id': 'x'}]})
        assert response.status_code == 422
