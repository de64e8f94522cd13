from pathlib import Path

from tongues_image.constants import MimeTypes
from tongues_image.exceptions import TonguesImageError


class UnsupportedFormatError(TonguesImageError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported image extension: {extension or '(none)'}")


def infer_mime_type(file_path: str) -> str:
    """확장자로 Gemini inline data용 MIME 타입 결정

    Raises:
        UnsupportedFormatError: png/jpg/jpeg/webp/heic 외의 확장자 (확장자 없음 포함)
    """
    extension = Path(file_path).suffix.lower()
    mime_type = MimeTypes.BY_EXTENSION.get(extension)
    if mime_type is None:
        raise UnsupportedFormatError(extension)
    return mime_type
