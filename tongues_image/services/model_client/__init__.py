"""Model client 모듈

사용법:
    from tongues_image.services.model_client import create_model_client

    client = create_model_client(api_key)
    text = client.generate_text(model, prompt, image)

요청마다 새 클라이언트를 만들며 캐시하지 않음 (호출 간 공유 상태 없음).
"""

from collections.abc import Callable

from tongues_image.services.model_client.base import ModelClient, UpstreamServiceError
from tongues_image.services.model_client.gemini import GeminiModelClient

__all__ = [
    "ModelClient",
    "UpstreamServiceError",
    "create_model_client",
    "set_model_client_factory",
]

ModelClientFactory = Callable[[str], ModelClient]

_factory: ModelClientFactory | None = None


def create_model_client(api_key: str) -> ModelClient:
    """model client 생성 (팩토리가 설정되어 있으면 그것을 사용)"""
    if _factory is not None:
        return _factory(api_key)
    return GeminiModelClient(api_key=api_key)


def set_model_client_factory(factory: ModelClientFactory | None) -> None:
    """model client 팩토리 설정 (테스트용)"""
    global _factory
    _factory = factory
