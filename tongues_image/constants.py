class Defaults:
    INPUT_LANG = "auto"
    OUTPUT_LANG = "english"
    IMAGE_MODEL = "gemini-3-pro-image-preview"  # 추출 + 렌더링
    TEXT_MODEL = "gemini-3-pro-preview"  # 번역


class MimeTypes:
    BY_EXTENSION = {
        ".png": "image/png",
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".webp": "image/webp",
        ".heic": "image/heic",
    }


OUTPUT_SUFFIX = "_translated"
API_KEY_ENV = "GEMINI_API_KEY"
