from pathlib import Path

from boggle.settings import Settings


def test_defaults():
    cfg = Settings()
    assert cfg.BOARD_SIZE == 4
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"
    assert cfg.seed is None


def test_env_override_int(monkeypatch):
    monkeypatch.setenv("BOARD_SIZE", "5")
    monkeypatch.setenv("RANDOM_SEED", "11")
    cfg = Settings()
    assert cfg.BOARD_SIZE == 5
    assert cfg.seed == 11


def test_env_override_bool(monkeypatch):
    monkeypatch.setenv("DEBUG", "yes")
    assert Settings().DEBUG is True
    monkeypatch.setenv("DEBUG", "0")
    assert Settings().DEBUG is False


def test_env_override_path(monkeypatch, tmp_path):
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = Settings()
    assert isinstance(cfg.DICTIONARY_PATH, Path)
    assert cfg.DICTIONARY_PATH == tmp_path / "words.txt"
