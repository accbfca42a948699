# app/api/auth/test_routes.py


def _register(client, email='lee@example.com', password='secret123'):
    return client.post('/api/users', json={'name': 'lee', 'email': email, 'password': password})


def test_login_issues_token(client, app):
    _register(client)

    res = client.post('/api/auth', json={'email': 'lee@example.com', 'password': 'secret123'})

    assert res.status_code == 200
    assert app.services['tokens'].verify(res.get_json()['token'])


def test_login_with_wrong_password_or_unknown_email(client):
    _register(client)

    wrong_password = client.post('/api/auth', json={'email': 'lee@example.com', 'password': 'nope'})
    unknown_email = client.post('/api/auth', json={'email': 'who@example.com', 'password': 'secret123'})

    assert wrong_password.status_code == 400
    assert unknown_email.status_code == 400
    assert wrong_password.get_json() == unknown_email.get_json()
    assert wrong_password.get_json()['error_code'] == 'INVALID_CREDENTIALS'


def test_current_user_excludes_password(client, app):
    token = _register(client).get_json()['token']

    res = client.get('/api/auth', headers={app.config['AUTH_HEADER_NAME']: token})

    assert res.status_code == 200
    body = res.get_json()
    assert body['email'] == 'lee@example.com'
    assert body['name'] == 'lee'
    assert 'password' not in body


def test_current_user_requires_token(client):
    res = client.get('/api/auth')

    assert res.status_code == 401
    assert res.get_json()['error_code'] == 'AUTHORIZATION_DENIED'


def test_current_user_missing_document(client, app):
    token = app.services['tokens'].issue('0b8f6a2e-6c55-4f0e-9a43-2d7d5d0f6b1a')

    res = client.get('/api/auth', headers={app.config['AUTH_HEADER_NAME']: token})

    assert res.status_code == 404
    assert res.get_json()['error_code'] == 'USER_NOT_FOUND'
