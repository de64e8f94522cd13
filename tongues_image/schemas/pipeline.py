"""파이프라인 데이터 모델

Extraction → Translation → Rendering 전체에서 사용하는 요청 단위 스키마.
엔트리 순서(index)가 각 단계 사이의 조인 키.
"""

from pydantic import BaseModel, ConfigDict

from tongues_image.constants import Defaults
from tongues_image.schemas.base import BaseSchema


class TranslateRequest(BaseModel):
    """번역 요청 (생성 후 불변)

    api_key가 None이면 GEMINI_API_KEY 환경 변수에서 찾음.
    output_path가 None이면 입력 경로에 `_translated` 접미사를 붙여 생성.
    """

    model_config = ConfigDict(frozen=True)

    input_path: str
    output_path: str | None = None
    input_lang: str = Defaults.INPUT_LANG
    output_lang: str = Defaults.OUTPUT_LANG
    api_key: str | None = None
    image_model: str = Defaults.IMAGE_MODEL
    text_model: str = Defaults.TEXT_MODEL
    force: bool = False


class InlineImage(BaseModel):
    """요청당 한 번 읽어서 추출/렌더링에 재사용하는 이미지 바이트"""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str


class ExtractedEntry(BaseModel):
    """이미지에서 추출한 텍스트 한 조각"""

    text: str
    language: str | None = None  # ISO 639-1 (모델이 준 값 그대로)


class TextMapping(BaseModel):
    """렌더링 프롬프트에 넣는 원문 → 번역 매핑"""

    source: str
    translation: str


class ExtractedTranslation(BaseSchema):
    """추출 + 번역 결과 행 (CLI --extract 출력)"""

    source_text: str
    source_language: str | None = None
    translated_text: str
