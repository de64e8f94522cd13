"""tongues-image: Gemini 기반 이미지 텍스트 추출/번역 CLI"""

__version__ = "0.1.0"
