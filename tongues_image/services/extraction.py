"""Gemini 멀티모달 기반 텍스트 추출"""

import logging
from typing import Any

from tongues_image.schemas.pipeline import ExtractedEntry, InlineImage
from tongues_image.services.json_array import parse_json_array
from tongues_image.services.model_client import ModelClient

logger = logging.getLogger(__name__)

EXTRACT_PROMPT = " ".join(
    [
        "Extract every visible text segment from this image.",
        "Return only JSON array items with keys: text, language.",
        "language should be ISO 639-1 when possible.",
        "If nothing is found, return an empty array.",
    ]
)


def _normalize_entry(item: Any) -> ExtractedEntry:
    row: dict[str, Any] = item if isinstance(item, dict) else {}
    text = row.get("text")
    language = row.get("language")
    return ExtractedEntry(
        text=text.strip() if isinstance(text, str) else "",
        language=language if isinstance(language, str) else None,
    )


def extract_text_entries(
    client: ModelClient,
    inline_image: InlineImage,
    image_model: str,
) -> list[ExtractedEntry]:
    """이미지에서 보이는 텍스트를 모두 추출

    빈 텍스트는 제외하며, 남은 엔트리 순서가 이후 단계의 기준 index가 됨.

    Raises:
        MalformedModelOutputError: 응답에 JSON 배열이 없는 경우
    """
    raw_text = client.generate_text(image_model, EXTRACT_PROMPT, inline_image)
    raw_items = parse_json_array(raw_text or "")

    entries = [entry for entry in map(_normalize_entry, raw_items) if entry.text]
    logger.info(f"텍스트 추출 완료: {len(entries)}/{len(raw_items)}개")
    return entries
