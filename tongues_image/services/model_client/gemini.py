"""Gemini 기반 model client 구현체"""

# pyright: reportMissingTypeStubs=false

import logging

from google import genai
from google.genai import types

from tongues_image.schemas.pipeline import InlineImage

logger = logging.getLogger(__name__)

FALLBACK_IMAGE_MIME_TYPE = "image/png"


class GeminiModelClient:
    """Google Gemini API를 사용한 텍스트/이미지 생성

    API 키는 생성 시 한 번만 전달되며 로그나 요청 본문에 포함되지 않음.
    """

    def __init__(self, api_key: str) -> None:
        self._client = genai.Client(api_key=api_key)

    def generate_text(
        self, model: str, prompt: str, image: InlineImage | None = None
    ) -> str | None:
        response = self._client.models.generate_content(
            model=model,
            contents=self._build_contents(prompt, image),
        )
        return response.text

    def generate_image(self, model: str, prompt: str, image: InlineImage) -> list[InlineImage]:
        response = self._client.models.generate_content(
            model=model,
            contents=self._build_contents(prompt, image),
            config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
        )
        return self._collect_inline_images(response)

    def _build_contents(
        self, prompt: str, image: InlineImage | None
    ) -> list[types.Part | str]:
        if image is None:
            return [prompt]
        return [types.Part.from_bytes(data=image.data, mime_type=image.mime_type), prompt]

    def _collect_inline_images(self, response: types.GenerateContentResponse) -> list[InlineImage]:
        if not response.candidates:
            logger.warning("응답에 candidates가 없습니다")
            return []

        content = response.candidates[0].content
        if content is None or content.parts is None:
            return []

        images: list[InlineImage] = []
        for part in content.parts:
            if part.inline_data is None or not part.inline_data.data:
                continue
            images.append(
                InlineImage(
                    data=part.inline_data.data,
                    mime_type=part.inline_data.mime_type or FALLBACK_IMAGE_MIME_TYPE,
                )
            )

        return images
