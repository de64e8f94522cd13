"""번역 단계 테스트"""

import json

import pytest

from tongues_image.schemas.pipeline import ExtractedEntry, InlineImage
from tongues_image.services.json_array import MalformedModelOutputError
from tongues_image.services.translation import merge_translations, translate_entries

ENTRIES = [
    ExtractedEntry(text="こんにちは", language="ja"),
    ExtractedEntry(text="メニュー"),
]


class StubTextClient:
    def __init__(self, text: str | None) -> None:
        self._text = text
        self.calls: list[tuple[str, str, InlineImage | None]] = []

    def generate_text(
        self, model: str, prompt: str, image: InlineImage | None = None
    ) -> str | None:
        self.calls.append((model, prompt, image))
        return self._text

    def generate_image(self, model: str, prompt: str, image: InlineImage) -> list[InlineImage]:
        raise AssertionError("이미지 생성이 호출되면 안 됨")


class UnreachableClient:
    def generate_text(
        self, model: str, prompt: str, image: InlineImage | None = None
    ) -> str | None:
        raise AssertionError("API가 호출되면 안 됨")

    def generate_image(self, model: str, prompt: str, image: InlineImage) -> list[InlineImage]:
        raise AssertionError("API가 호출되면 안 됨")


class TestTranslateEntries:
    def test_empty_entries_skip_api_call(self) -> None:
        assert translate_entries(UnreachableClient(), [], "auto", "english", "text-model") == []

    def test_returns_translations_by_index(self) -> None:
        client = StubTextClient(
            '[{"index": 1, "translation": "Menu"}, {"index": 0, "translation": "Hello"}]'
        )

        result = translate_entries(client, ENTRIES, "auto", "english", "text-model")

        assert result == ["Hello", "Menu"]

    def test_sends_text_only_request_to_text_model(self) -> None:
        client = StubTextClient("[]")

        translate_entries(client, ENTRIES, "auto", "english", "text-model")

        model, _, image = client.calls[0]
        assert model == "text-model"
        assert image is None

    def test_prompt_with_auto_detect(self) -> None:
        client = StubTextClient("[]")

        translate_entries(client, ENTRIES, "AUTO", "german", "text-model")

        prompt = client.calls[0][1]
        assert "Translate each item into german." in prompt
        assert "Auto-detect source language per entry." in prompt
        assert "Source language for all entries" not in prompt
        assert "Return only a JSON array with objects: { index, translation }." in prompt
        assert "Preserve meaning and tone." in prompt

    def test_prompt_with_fixed_source_language(self) -> None:
        client = StubTextClient("[]")

        translate_entries(client, ENTRIES, "japanese", "english", "text-model")

        prompt = client.calls[0][1]
        assert "Source language for all entries: japanese." in prompt
        assert "Auto-detect" not in prompt

    def test_payload_follows_prompt(self) -> None:
        client = StubTextClient("[]")

        translate_entries(client, ENTRIES, "auto", "english", "text-model")

        _, payload = client.calls[0][1].split("\n\n", 1)
        assert payload == '[{"index":0,"text":"こんにちは","language":"ja"},{"index":1,"text":"メニュー"}]'
        assert json.loads(payload)[1] == {"index": 1, "text": "メニュー"}

    def test_missing_translation_falls_back_to_source(self) -> None:
        client = StubTextClient('[{"index": 0, "translation": "Hello"}]')

        result = translate_entries(client, ENTRIES, "auto", "english", "text-model")

        assert result == ["Hello", "メニュー"]

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(MalformedModelOutputError):
            translate_entries(StubTextClient("not-json"), ENTRIES, "auto", "english", "m")

    def test_missing_response_text_raises(self) -> None:
        with pytest.raises(MalformedModelOutputError):
            translate_entries(StubTextClient(None), ENTRIES, "auto", "english", "m")


class TestMergeTranslations:
    def test_ignores_invalid_indices(self) -> None:
        raw_items = [
            {"index": 5, "translation": "out of range"},
            {"index": -1, "translation": "negative"},
            {"index": "0", "translation": "string index"},
            {"index": True, "translation": "bool index"},
            {"index": 0.5, "translation": "fractional"},
            {"translation": "no index"},
            "not an object",
            None,
            {"index": 1, "translation": "Menu"},
        ]

        assert merge_translations(raw_items, ENTRIES) == ["こんにちは", "Menu"]

    def test_integral_float_index_is_accepted(self) -> None:
        assert merge_translations([{"index": 1.0, "translation": "Menu"}], ENTRIES) == [
            "こんにちは",
            "Menu",
        ]

    def test_last_write_wins(self) -> None:
        raw_items = [
            {"index": 0, "translation": "Hi"},
            {"index": 0, "translation": "Hello"},
        ]

        assert merge_translations(raw_items, ENTRIES)[0] == "Hello"

    def test_non_string_translation_falls_back_to_source(self) -> None:
        raw_items = [
            {"index": 0, "translation": "Hello"},
            {"index": 0, "translation": 123},
            {"index": 1, "translation": ""},
        ]

        assert merge_translations(raw_items, ENTRIES) == ["こんにちは", "メニュー"]

    def test_length_always_matches_entries(self) -> None:
        assert len(merge_translations([], ENTRIES)) == len(ENTRIES)
