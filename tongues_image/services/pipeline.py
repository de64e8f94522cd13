"""이미지 번역 파이프라인

Extraction → Translation → (Rendering | 원본 복사) 순서로 실행.
모든 검증(입력 파일, 출력 덮어쓰기, API 키, 확장자)은 모델 호출 전에 끝냄.
실패 시 즉시 중단하며 부분 결과 파일을 남기지 않음. 재시도 없음.
"""

import logging
from pathlib import Path

from tongues_image.config import Settings
from tongues_image.constants import API_KEY_ENV, OUTPUT_SUFFIX
from tongues_image.exceptions import TonguesImageError
from tongues_image.schemas.pipeline import ExtractedTranslation, InlineImage, TranslateRequest
from tongues_image.services.extraction import extract_text_entries
from tongues_image.services.mime import infer_mime_type
from tongues_image.services.model_client import ModelClient, create_model_client
from tongues_image.services.rendering import render_image
from tongues_image.services.translation import translate_entries

logger = logging.getLogger(__name__)


class InputNotFoundError(TonguesImageError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Input file not found: {path}")


class OutputExistsError(TonguesImageError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Output file already exists: {path}. Use --force to overwrite.")


class MissingCredentialError(TonguesImageError):
    def __init__(self) -> None:
        super().__init__(f"{API_KEY_ENV} is required. Set it or pass --api-key.")


def resolve_api_key(explicit_api_key: str | None) -> str:
    """API 키 결정: 명시적 값 → 환경 변수(.env 포함)

    명시적으로 빈 문자열을 넘기면 환경 변수로 넘어가지 않고 실패.
    환경 변수는 호출마다 새로 읽음 (캐시된 settings 사용 안 함).

    Raises:
        MissingCredentialError: 키가 없거나 빈 문자열인 경우
    """
    api_key = explicit_api_key if explicit_api_key is not None else Settings().gemini_api_key
    if not api_key:
        raise MissingCredentialError()
    return api_key


def default_output_path(input_path: str) -> str:
    """`/tmp/menu.jpg` → `/tmp/menu_translated.jpg`"""
    path = Path(input_path)
    return str(path.with_name(f"{path.stem}{OUTPUT_SUFFIX}{path.suffix}"))


def resolve_output_path(request: TranslateRequest) -> str:
    if request.output_path:
        return request.output_path
    return default_output_path(request.input_path)


def ensure_file_exists(file_path: str) -> None:
    if not Path(file_path).is_file():
        raise InputNotFoundError(file_path)


def ensure_output_writable(output_path: str, force: bool) -> None:
    if not force and Path(output_path).exists():
        raise OutputExistsError(output_path)


def read_inline_image(input_path: str) -> InlineImage:
    """확장자 검증 후 이미지 바이트 로드

    Raises:
        UnsupportedFormatError: 지원하지 않는 확장자
    """
    mime_type = infer_mime_type(input_path)
    return InlineImage(data=Path(input_path).read_bytes(), mime_type=mime_type)


def _prepare(request: TranslateRequest) -> tuple[ModelClient, InlineImage]:
    api_key = resolve_api_key(request.api_key)
    inline_image = read_inline_image(request.input_path)
    return create_model_client(api_key), inline_image


def extract_and_translate_text(request: TranslateRequest) -> list[ExtractedTranslation]:
    """이미지에서 텍스트를 추출하고 번역 결과 행 반환 (파일 쓰기 없음)

    Raises:
        InputNotFoundError, MissingCredentialError, UnsupportedFormatError,
        MalformedModelOutputError, UpstreamServiceError
    """
    ensure_file_exists(request.input_path)
    client, inline_image = _prepare(request)

    entries = extract_text_entries(client, inline_image, request.image_model)
    translations = translate_entries(
        client, entries, request.input_lang, request.output_lang, request.text_model
    )

    return [
        ExtractedTranslation(
            source_text=entry.text,
            source_language=entry.language,
            translated_text=translations[i] if i < len(translations) else entry.text,
        )
        for i, entry in enumerate(entries)
    ]


def recreate_image_with_translated_text(request: TranslateRequest) -> str:
    """번역된 텍스트로 이미지를 다시 만들어 저장

    추출된 텍스트가 없으면 렌더링 없이 원본 바이트를 그대로 복사.

    Returns:
        저장된 출력 파일 경로

    Raises:
        InputNotFoundError, OutputExistsError, MissingCredentialError,
        UnsupportedFormatError, MalformedModelOutputError,
        MissingRenderedImageError, UpstreamServiceError
    """
    ensure_file_exists(request.input_path)

    output_path = resolve_output_path(request)
    ensure_output_writable(output_path, request.force)

    client, inline_image = _prepare(request)

    entries = extract_text_entries(client, inline_image, request.image_model)
    translations = translate_entries(
        client, entries, request.input_lang, request.output_lang, request.text_model
    )

    if not entries:
        logger.info("추출된 텍스트 없음: 원본 이미지 복사")
        output_bytes = inline_image.data
    else:
        output_bytes = render_image(
            client,
            inline_image,
            entries,
            translations,
            request.output_lang,
            request.image_model,
        )

    Path(output_path).write_bytes(output_bytes)
    logger.info(f"저장 완료: {output_path}")
    return output_path
