import json

from twitch_helix.domain.models.token import Token
from twitch_helix.infra.persistence.token_repository_file import FileTokenRepository
from twitch_helix.infra.persistence.token_repository_memory import MemoryTokenRepository


def test_missing_file_gives_empty_token(tmp_path):
    repository = FileTokenRepository(tmp_path / "missing.json")

    token = repository.get()

    assert token.access_token is None
    assert token.is_expired()


def test_save_writes_token_fields(tmp_path):
    path = tmp_path / "nested" / ".tokens.json"
    repository = FileTokenRepository(path)

    repository.set(Token(created_at=1_700_000_000_000, access_token="abc", expires_in=5000, token_type="Bearer"))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "created_at": 1_700_000_000_000,
        "access_token": "abc",
        "expires_in": 5000,
        "token_type": "Bearer",
    }
    assert repository.get().access_token == "abc"


def test_save_replaces_previous_token(tmp_path):
    repository = FileTokenRepository(tmp_path / ".tokens.json")

    repository.set(Token(access_token="first", expires_in=1))
    repository.set(Token(access_token="second", expires_in=2))

    assert repository.get().access_token == "second"
    assert repository.get().expires_in == 2


def test_corrupt_file_gives_empty_token(tmp_path):
    path = tmp_path / ".tokens.json"
    path.write_text("{not json", encoding="utf-8")

    assert FileTokenRepository(path).get().access_token is None


def test_memory_repository():
    repository = MemoryTokenRepository()

    assert repository.get().access_token is None

    repository.set(Token(access_token="abc"))

    assert repository.get().access_token == "abc"
