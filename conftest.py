# conftest.py
"""
공용 pytest 픽스처

Firestore 대신 메모리 기반 더블을 create_app(db=...)으로 주입합니다.
"""

import copy
import pytest

from app import create_app


class FakeStoreError(Exception):
    pass


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentRef:
    def __init__(self, db, collection, doc_id):
        self._db = db
        self._collection = collection
        self.id = doc_id

    def get(self):
        self._db.check('get')
        return FakeSnapshot(self.id, self._db.data.get(self._collection, {}).get(self.id))

    def set(self, data):
        self._db.check('set')
        self._db.data.setdefault(self._collection, {})[self.id] = copy.deepcopy(data)

    def delete(self):
        self._db.check('delete')
        self._db.data.get(self._collection, {}).pop(self.id, None)


class FakeQuery:
    def __init__(self, db, collection, filters=(), order=None, limit_to=None):
        self._db = db
        self._collection = collection
        self._filters = list(filters)
        self._order = order
        self._limit = limit_to

    def where(self, field_name, op, value):
        assert op == '==', "FakeQuery는 '==' 조건만 지원합니다."
        return FakeQuery(self._db, self._collection, self._filters + [(field_name, value)], self._order, self._limit)

    def order_by(self, field_name, direction='ASCENDING'):
        return FakeQuery(self._db, self._collection, self._filters, (field_name, direction), self._limit)

    def limit(self, count):
        return FakeQuery(self._db, self._collection, self._filters, self._order, count)

    def document(self, doc_id):
        return FakeDocumentRef(self._db, self._collection, doc_id)

    def stream(self):
        self._db.check('stream')
        items = list(self._db.data.get(self._collection, {}).items())
        items = [(k, v) for k, v in items if all(v.get(f) == value for f, value in self._filters)]
        if self._order:
            field_name, direction = self._order
            items.sort(key=lambda item: item[1][field_name], reverse=(direction == 'DESCENDING'))
        if self._limit is not None:
            items = items[:self._limit]
        return iter([FakeSnapshot(k, copy.deepcopy(v)) for k, v in items])


class FakeFirestore:
    """collection/document/where/order_by/limit/stream만 흉내 내는 Firestore 더블"""

    def __init__(self):
        self.data = {}
        self.fail_on = set()

    def check(self, operation):
        if operation in self.fail_on:
            raise FakeStoreError(f"simulated backend failure during {operation}")

    def collection(self, name):
        return FakeQuery(self, name)

    def documents(self, collection):
        return self.data.setdefault(collection, {})


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def app(fake_db):
    return create_app('testing', db=fake_db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client, app):
    """회원가입 후 (user_id, 인증 헤더)를 반환하는 헬퍼"""
    counter = {'n': 0}

    def _register(name='tester'):
        counter['n'] += 1
        res = client.post('/api/users', json={
            'name': name,
            'email': f"{name}{counter['n']}@example.com",
            'password': 'secret123'
        })
        assert res.status_code == 201, res.get_json()
        token = res.get_json()['token']
        user_id = app.services['tokens'].verify(token)
        return user_id, {app.config['AUTH_HEADER_NAME']: token}

    return _register
