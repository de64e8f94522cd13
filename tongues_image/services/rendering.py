"""Nano Banana: Gemini 이미지 생성 기반 번역 이미지 렌더링

원본 이미지와 원문 → 번역 매핑을 함께 보내서
텍스트만 교체된 이미지를 다시 생성하도록 요청합니다.
"""

import json
import logging

from tongues_image.exceptions import TonguesImageError
from tongues_image.schemas.pipeline import ExtractedEntry, InlineImage, TextMapping
from tongues_image.services.model_client import ModelClient

logger = logging.getLogger(__name__)


class MissingRenderedImageError(TonguesImageError):
    def __init__(self) -> None:
        super().__init__("Gemini did not return an image.")


def build_mapping(entries: list[ExtractedEntry], translations: list[str]) -> list[TextMapping]:
    """index 기준 원문 → 번역 매핑 (번역이 모자라면 원문 사용)"""
    return [
        TextMapping(
            source=entry.text,
            translation=translations[i] if i < len(translations) else entry.text,
        )
        for i, entry in enumerate(entries)
    ]


def _build_prompt(output_lang: str, mapping: list[TextMapping]) -> str:
    mapping_json = json.dumps(
        [m.model_dump() for m in mapping], ensure_ascii=False, separators=(",", ":")
    )
    return " ".join(
        [
            f"Recreate this image with text translated to {output_lang}.",
            "Replace only text. Keep layout, style, and non-text pixels unchanged.",
            f"Use this exact mapping JSON: {mapping_json}",
        ]
    )


def render_image(
    client: ModelClient,
    inline_image: InlineImage,
    entries: list[ExtractedEntry],
    translations: list[str],
    output_lang: str,
    image_model: str,
) -> bytes:
    """번역된 텍스트로 이미지 재생성

    Returns:
        응답의 첫 번째 inline 이미지 바이트

    Raises:
        MissingRenderedImageError: 응답에 이미지가 없음 (재시도 없음)
    """
    prompt = _build_prompt(output_lang, build_mapping(entries, translations))
    images = client.generate_image(image_model, prompt, inline_image)

    if not images:
        raise MissingRenderedImageError()

    logger.info(f"렌더링 완료: {images[0].mime_type}, {len(images[0].data)} bytes")
    return images[0].data
