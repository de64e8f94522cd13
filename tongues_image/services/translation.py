"""Gemini 기반 번역 서비스

추출된 엔트리를 한 번의 API 호출로 번역하고, 응답의 index로 원래 순서에 맞춰 병합.
"""

import json
import logging
from typing import Any

from tongues_image.schemas.pipeline import ExtractedEntry
from tongues_image.services.json_array import parse_json_array
from tongues_image.services.model_client import ModelClient

logger = logging.getLogger(__name__)

AUTO_DETECT = "auto"


def _build_prompt(input_lang: str, output_lang: str) -> str:
    if input_lang.lower() == AUTO_DETECT:
        source_instruction = "Auto-detect source language per entry."
    else:
        source_instruction = f"Source language for all entries: {input_lang}."

    return " ".join(
        [
            f"Translate each item into {output_lang}.",
            source_instruction,
            "Return only a JSON array with objects: { index, translation }.",
            "Preserve meaning and tone.",
        ]
    )


def _build_payload(entries: list[ExtractedEntry]) -> str:
    payload = [
        {"index": index, **entry.model_dump(exclude_none=True)}
        for index, entry in enumerate(entries)
    ]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _parse_index(value: Any, size: int) -> int | None:
    """응답의 index 검증. 숫자가 아니거나 범위 밖이면 None"""
    # bool은 int의 하위 타입이므로 먼저 제외
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None

    index = int(value)
    if not 0 <= index < size:
        return None
    return index


def merge_translations(raw_items: list[Any], entries: list[ExtractedEntry]) -> list[str]:
    """응답 항목을 엔트리 순서에 맞춰 병합

    같은 index가 여러 번 오면 마지막 값이 이김.
    번역이 없거나 빈 문자열인 자리는 원문으로 채움 (항상 len(entries)개 반환).
    """
    output = [""] * len(entries)

    for item in raw_items:
        row: dict[str, Any] = item if isinstance(item, dict) else {}
        index = _parse_index(row.get("index"), len(output))
        if index is None:
            logger.warning(f"번역 결과 스킵 (잘못된 index): {item}")
            continue

        translation = row.get("translation")
        output[index] = translation if isinstance(translation, str) else ""

    return [value or entries[index].text for index, value in enumerate(output)]


def translate_entries(
    client: ModelClient,
    entries: list[ExtractedEntry],
    input_lang: str,
    output_lang: str,
    text_model: str,
) -> list[str]:
    """엔트리들을 output_lang으로 번역

    Returns:
        entries와 같은 길이/순서의 번역 문자열 리스트

    Raises:
        MalformedModelOutputError: 응답에 JSON 배열이 없는 경우
    """
    if not entries:
        return []

    prompt = _build_prompt(input_lang, output_lang)
    raw_text = client.generate_text(text_model, f"{prompt}\n\n{_build_payload(entries)}")
    raw_items = parse_json_array(raw_text or "")

    translations = merge_translations(raw_items, entries)
    logger.info(f"번역 완료: {len(raw_items)}개 응답 → {len(translations)}개 엔트리")
    return translations
