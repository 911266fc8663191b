import pytest
from pydantic import ValidationError

from api.config import Settings


def test_memory_storage_disallowed_in_prod(monkeypatch):
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    with pytest.raises(ValidationError):
        Settings(service_env="prod", storage_backend="memory", _env_file=None)
    settings = Settings(service_env="prod", storage_backend="sql", _env_file=None)
    assert settings.storage_backend == "sql"


def test_memory_storage_allowed_in_dev():
    settings = Settings(service_env="dev", storage_backend="memory", _env_file=None)
    assert settings.storage_backend == "memory"


def test_unknown_storage_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(storage_backend="redis", _env_file=None)


def test_default_user_required(monkeypatch):
    monkeypatch.delenv("DEFAULT_USER_ID", raising=False)
    with pytest.raises(ValidationError):
        Settings(default_user_id="  ", _env_file=None)


def test_api_keys_parsing():
    settings = Settings(api_keys="ana:tok-1, luis:tok-2,malformado,", _env_file=None)
    assert settings.parsed_api_keys() == {"tok-1": "ana", "tok-2": "luis"}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("MAX_BODY_BYTES", "1024")
    settings = Settings(_env_file=None)
    assert settings.storage_backend == "memory"
    assert settings.max_body_bytes == 1024
