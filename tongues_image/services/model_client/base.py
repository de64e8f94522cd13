"""Model client Protocol

교체 가능한 멀티모달 모델 전송 계층 인터페이스 정의.
파이프라인은 이 Protocol에만 의존하며, 테스트에서는 fake 구현체를 주입.
"""

from typing import Protocol

from google.genai import errors

from tongues_image.schemas.pipeline import InlineImage

# 전송 계층 예외 (rate limit, 인증 실패, 네트워크 오류 등). 감싸거나 재시도하지 않음.
UpstreamServiceError = errors.APIError


class ModelClient(Protocol):
    """멀티모달 생성 인터페이스

    구현체:
    - GeminiModelClient: Google Gemini API
    """

    def generate_text(
        self, model: str, prompt: str, image: InlineImage | None = None
    ) -> str | None:
        """텍스트 응답 생성 (이미지 첨부 가능)

        Returns:
            모델이 반환한 자유 형식 텍스트. 텍스트가 없으면 None.
        """
        ...

    def generate_image(self, model: str, prompt: str, image: InlineImage) -> list[InlineImage]:
        """이미지 응답 생성

        Returns:
            응답 parts 중 inline data를 가진 것들 (parts 순서 유지). 없으면 빈 리스트.
        """
        ...
