import pytest

from neonheart import config
from neonheart.config import Settings, load_settings


def test_defaults_from_empty_environment():
    assert load_settings({}) == Settings()


def test_reads_overrides():
    s = load_settings({
        "NEONHEART_WIDTH": "320",
        "NEONHEART_HEIGHT": "180",
        "NEONHEART_SCALE": "2",
        "NEONHEART_FPS": "60",
        "NEONHEART_WORKERS": "4",
        "NEONHEART_CAPTION": "Hello",
    })
    assert s == Settings(width=320, height=180, scale=2, fps=60, workers=4, caption="Hello")


@pytest.mark.parametrize("name", ["NEONHEART_WIDTH", "NEONHEART_FPS", "NEONHEART_WORKERS"])
@pytest.mark.parametrize("raw", ["0", "-3", "abc"])
def test_rejects_invalid_values(name, raw):
    with pytest.raises(ValueError, match=name):
        load_settings({name: raw})


def test_loads_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("NEONHEART_FPS=12\n")
    monkeypatch.setattr(config, "ROOT", tmp_path)
    monkeypatch.setenv("NEONHEART_FPS", "1")
    monkeypatch.delenv("NEONHEART_FPS")
    assert load_settings().fps == 12
