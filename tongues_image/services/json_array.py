"""모델 출력에서 JSON 배열 복구

모델은 ```json 코드 펜스나 앞뒤 설명문을 섞어서 응답하는 경우가 많음.
"""

import json
import re
from typing import Any

from tongues_image.exceptions import TonguesImageError

_LEADING_FENCE = re.compile(r"^```json\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")


class MalformedModelOutputError(TonguesImageError):
    def __init__(self) -> None:
        super().__init__("Model output did not contain a valid JSON array.")


def _strip_fence(text: str) -> str:
    text = _LEADING_FENCE.sub("", text.strip())
    return _TRAILING_FENCE.sub("", text).strip()


def parse_json_array(raw_text: str) -> list[Any]:
    """모델 텍스트에서 JSON 배열 파싱

    1. 펜스 제거 후 전체 파싱
    2. 실패하면 첫 `[` ~ 마지막 `]` 구간만 파싱

    Raises:
        MalformedModelOutputError: 복구 가능한 배열이 없는 경우
    """
    unfenced = _strip_fence(raw_text)

    try:
        parsed = json.loads(unfenced)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, list):
        return parsed

    start = unfenced.find("[")
    end = unfenced.rfind("]")
    if start != -1 and end > start:
        try:
            parsed = json.loads(unfenced[start : end + 1])
        except json.JSONDecodeError as e:
            raise MalformedModelOutputError() from e
        if isinstance(parsed, list):
            return parsed

    raise MalformedModelOutputError()
