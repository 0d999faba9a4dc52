import pytest


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """実行環境や .env の NUMCONV_* 設定をテストに持ち込まない"""
    # 空文字で設定しておけば load_dotenv() は上書きしない
    monkeypatch.setenv("NUMCONV_UNICODE", "")
    monkeypatch.setenv("NUMCONV_LOG_LEVEL", "")
