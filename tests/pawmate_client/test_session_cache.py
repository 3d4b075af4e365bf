import json

from pawmate_client.session_cache import TOKEN_KEY, USER_KEY, CachedSession, SessionCache


def test_load_returns_none_when_nothing_cached(tmp_path) -> None:
    assert SessionCache(tmp_path / 'session.json').load() is None


def test_save_then_load_round_trips_session(tmp_path) -> None:
    cache = SessionCache(tmp_path / 'session.json')

    cache.save('token-123', {'id': 1, 'role': 'admin'})

    assert cache.load() == CachedSession(token='token-123', user={'id': 1, 'role': 'admin'})
    assert cache.load().role == 'admin'


def test_clear_removes_session(tmp_path) -> None:
    cache = SessionCache(tmp_path / 'session.json')
    cache.save('token-123', {'id': 1, 'role': 'user'})

    cache.clear()

    assert cache.load() is None


def test_clear_keeps_unrelated_keys(tmp_path) -> None:
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({'theme': 'dark'}), encoding='utf-8')
    cache = SessionCache(path)
    cache.save('token-123', {'id': 1})

    cache.clear()

    assert json.loads(path.read_text(encoding='utf-8')) == {'theme': 'dark'}


def test_undecodable_user_snapshot_loads_as_no_session(tmp_path) -> None:
    path = tmp_path / 'session.json'
    path.write_text(json.dumps({TOKEN_KEY: 'token-123', USER_KEY: '{not json'}), encoding='utf-8')

    assert SessionCache(path).load() is None


def test_corrupt_store_loads_as_no_session(tmp_path) -> None:
    path = tmp_path / 'session.json'
    path.write_text('garbage', encoding='utf-8')

    assert SessionCache(path).load() is None
