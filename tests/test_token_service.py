import re

import pytest

from apps.authentication.services.token_service import (
    BAD_CREDENTIALS,
    CacheTokenStore,
    InMemoryTokenStore,
    TokenService,
    basic_auth_literal,
    generate_token,
    get_token_store,
)
from apps.core.exceptions import StoreFailure

BASIC_AUTH = 'Basic YWRtaW46cGFzc3dvcmQxMjM='


@pytest.fixture
def store():
    return InMemoryTokenStore()


@pytest.fixture
def service(store):
    return TokenService(store=store, username='admin', password='password123')


def test_generated_tokens_are_15_lowercase_hex_characters():
    tokens = {generate_token() for _ in range(50)}

    assert all(re.fullmatch(r'[0-9a-f]{15}', token) for token in tokens)
    assert len(tokens) == 50


def test_basic_auth_literal_for_admin():
    assert basic_auth_literal('admin', 'password123') == BASIC_AUTH


def test_exchange_issues_a_live_token(service, store):
    token, reason = service.exchange('admin', 'password123')

    assert reason is None
    assert store.is_live(token)


@pytest.mark.parametrize('username, password', [
    ('admin', 'wrong'),
    ('Admin', 'password123'),
    (None, None),
    ('', ''),
])
def test_exchange_rejects_other_credentials(service, store, username, password):
    token, reason = service.exchange(username, password)

    assert token is None
    assert reason == BAD_CREDENTIALS


def test_authorize_accepts_live_cookie_token(service):
    token, _ = service.exchange('admin', 'password123')

    assert service.authorize(token, None)


def test_authorize_accepts_admin_basic_auth(service):
    assert service.authorize(None, BASIC_AUTH)
    assert service.authorize('unknown-token', BASIC_AUTH)


@pytest.mark.parametrize('cookie_token, auth_header', [
    (None, None),
    ('', ''),
    ('abc123', None),
    (None, 'Basic YWRtaW46d3Jvbmc='),
    (None, 'basic YWRtaW46cGFzc3dvcmQxMjM='),
    (None, 'Bearer YWRtaW46cGFzc3dvcmQxMjM='),
])
def test_authorize_denies_everything_else(service, cookie_token, auth_header):
    assert not service.authorize(cookie_token, auth_header)


def test_revoked_token_is_no_longer_authorized(service, store):
    token, _ = service.exchange('admin', 'password123')

    store.revoke(token)

    assert not service.authorize(token, None)


def test_credentials_follow_configuration(store):
    service = TokenService(store=store, username='root', password='s3cret')

    assert service.exchange('admin', 'password123') == (None, BAD_CREDENTIALS)
    assert service.authorize(None, basic_auth_literal('root', 's3cret'))
    assert not service.authorize(None, BASIC_AUTH)


def test_cache_token_store_round_trip():
    store = CacheTokenStore()

    assert not store.is_live('0123456789abcde')

    store.issue('0123456789abcde')
    assert store.is_live('0123456789abcde')
    assert CacheTokenStore().is_live('0123456789abcde')

    store.revoke('0123456789abcde')
    assert not store.is_live('0123456789abcde')


def test_configured_store_is_shared():
    assert isinstance(get_token_store(), CacheTokenStore)
    assert get_token_store() is get_token_store()


def test_default_service_reads_settings(settings):
    settings.AUTH_USERNAME = 'operator'
    settings.AUTH_PASSWORD = 'hunter2'
    service = TokenService(store=InMemoryTokenStore())

    token, reason = service.exchange('operator', 'hunter2')

    assert reason is None
    assert service.authorize(token, None)


def test_cache_token_store_refuses_unpersisted_tokens(monkeypatch):
    store = CacheTokenStore()
    monkeypatch.setattr(store.client, 'set', lambda *args, **kwargs: False)

    with pytest.raises(StoreFailure):
        store.issue('0123456789abcde')


def test_cache_token_store_keeps_every_issued_token():
    store = CacheTokenStore()
    tokens = [generate_token() for _ in range(400)]

    for token in tokens:
        store.issue(token)

    assert all(store.is_live(token) for token in tokens)
