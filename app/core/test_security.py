# app/core/test_security.py
"""
토큰 검증기와 인증 데코레이터 테스트

사용법: python -m pytest app/core/test_security.py -v
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.security import ALGORITHM, TokenVerificationError, TokenVerifier, is_owner

SECRET = 'unit-test-secret-key-with-enough-length'


def test_issue_and_verify_returns_user_id():
    verifier = TokenVerifier(SECRET)
    token = verifier.issue('user-1')
    assert verifier.verify(token) == 'user-1'


def test_token_payload_carries_user_claim():
    token = TokenVerifier(SECRET, expires_in=60).issue('user-1')
    payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
    assert payload['user'] == {'id': 'user-1'}
    assert payload['exp'] - payload['iat'] == 60


def test_verifier_requires_secret():
    with pytest.raises(ValueError):
        TokenVerifier('')


@pytest.mark.parametrize('token', [None, '', 'not-a-jwt', 'a.b.c'])
def test_missing_or_malformed_token_is_rejected(token):
    with pytest.raises(TokenVerificationError) as exc:
        TokenVerifier(SECRET).verify(token)
    assert not exc.value.expired


def test_token_signed_with_other_secret_is_rejected():
    token = TokenVerifier('another-unit-test-secret-key-of-length').issue('user-1')
    with pytest.raises(TokenVerificationError):
        TokenVerifier(SECRET).verify(token)


def test_expired_token_is_rejected():
    verifier = TokenVerifier(SECRET, expires_in=60)
    token = verifier.issue('user-1', now=datetime.now(timezone.utc) - timedelta(hours=1))
    with pytest.raises(TokenVerificationError) as exc:
        verifier.verify(token)
    assert exc.value.expired


def test_token_without_user_claim_is_rejected():
    token = jwt.encode({'sub': 'user-1'}, SECRET, algorithm=ALGORITHM)
    with pytest.raises(TokenVerificationError):
        TokenVerifier(SECRET).verify(token)


def test_is_owner_uses_requested_field():
    post = {'user_id': 'author', 'comments': []}
    comment = {'comment_id': 'c1', 'user_id': 'commenter'}

    assert is_owner('author', post)
    assert not is_owner('commenter', post)
    assert is_owner('commenter', comment)
    assert not is_owner('author', {'author_id': 'author'})
    assert is_owner('author', {'author_id': 'author'}, owner_field='author_id')


def test_gate_rejects_missing_header_without_running_view(client, fake_db):
    res = client.post('/api/posts', json={'text': 'hello'})

    assert res.status_code == 401
    assert res.get_json()['error_code'] == 'AUTHORIZATION_DENIED'
    assert fake_db.documents('posts') == {}


def test_gate_rejects_foreign_signature(client, app, fake_db):
    token = TokenVerifier('foreign-secret-key-that-is-long-enough-x').issue('user-1')
    res = client.post('/api/posts', json={'text': 'hello'}, headers={app.config['AUTH_HEADER_NAME']: token})

    assert res.status_code == 401
    assert res.get_json()['error_code'] == 'INVALID_TOKEN'
    assert fake_db.documents('posts') == {}


def test_gate_rejects_expired_token(client, app):
    verifier = app.services['tokens']
    token = verifier.issue('user-1', now=datetime.now(timezone.utc) - timedelta(seconds=verifier.expires_in + 10))
    res = client.get('/api/posts', headers={app.config['AUTH_HEADER_NAME']: token})

    assert res.status_code == 401
    assert res.get_json() == {'error_code': 'INVALID_TOKEN', 'message': 'Token has expired'}


def test_gate_ignores_bearer_authorization_header(client, app):
    token = app.services['tokens'].issue('user-1')
    res = client.get('/api/posts', headers={'Authorization': f'Bearer {token}'})

    assert res.status_code == 401
    assert res.get_json()['error_code'] == 'AUTHORIZATION_DENIED'
