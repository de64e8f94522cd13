from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from tongues_image.constants import Defaults


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Gemini API
    gemini_api_key: str = ""
    gemini_image_model: str = Defaults.IMAGE_MODEL
    gemini_text_model: str = Defaults.TEXT_MODEL

    # Languages
    default_input_lang: str = Defaults.INPUT_LANG
    default_output_lang: str = Defaults.OUTPUT_LANG


@lru_cache
def get_settings() -> Settings:
    return Settings()
