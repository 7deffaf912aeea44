import pytest

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("STRONGPASS_CONFIG", str(tmp_path / "config.json"))
