from collections.abc import Generator
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from tongues_image.config import get_settings
from tongues_image.services.model_client import set_model_client_factory


def make_test_image(width: int = 8, height: int = 8, fmt: str = "PNG", color: str = "red") -> bytes:
    """테스트용 실제 이미지 바이트 생성"""
    img = Image.new("RGB", (width, height), color=color)
    buf = BytesIO()
    img.save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """환경 변수, `.env`, settings 캐시, client 팩토리 격리"""
    for name in ("GEMINI_API_KEY", "GEMINI_IMAGE_MODEL", "GEMINI_TEXT_MODEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    set_model_client_factory(None)
    yield
    set_model_client_factory(None)
    get_settings.cache_clear()


@pytest.fixture
def input_image(tmp_path: Path) -> Path:
    """PNG 입력 이미지 (tmp_path/input.png)"""
    path = tmp_path / "input.png"
    path.write_bytes(make_test_image())
    return path


@pytest.fixture
def rendered_image_bytes() -> bytes:
    return make_test_image(color="blue")
