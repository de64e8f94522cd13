"""tongues-image CLI

이미지의 텍스트를 번역해서 다시 그리거나(--extract 없이),
텍스트만 추출/번역해서 JSON으로 출력(--extract).

stdout에는 결과만 출력하고, 로그와 에러 메시지는 stderr로 보냄.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from typing import NamedTuple

from tongues_image.config import get_settings
from tongues_image.schemas.pipeline import ExtractedTranslation, TranslateRequest
from tongues_image.services.pipeline import (
    extract_and_translate_text,
    recreate_image_with_translated_text,
)

logger = logging.getLogger(__name__)

PROG = "tongues-image"

EXAMPLES = """\
Examples:
  tongues-image ./menu-jp.png
  tongues-image ./menu-jp.png --output ./menu-en.png --output-lang english
  tongues-image ./menu-jp.png --extract --input-lang auto --output-lang english"""


class CommandHandlers(NamedTuple):
    """파이프라인 진입점 (테스트에서 교체)"""

    extract_and_translate_text: Callable[[TranslateRequest], list[ExtractedTranslation]]
    recreate_image_with_translated_text: Callable[[TranslateRequest], str]


DEFAULT_HANDLERS = CommandHandlers(
    extract_and_translate_text=extract_and_translate_text,
    recreate_image_with_translated_text=recreate_image_with_translated_text,
)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Recreate images with translated text, "
            "or extract text and translate without rendering."
        ),
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Path to the input image")
    parser.add_argument("-o", "--output", help="Output path for the translated image")
    parser.add_argument(
        "--extract",
        action="store_true",
        help="Only extract and translate text (prints JSON)",
    )
    parser.add_argument("--force", action="store_true", help="Overwrite existing output image")
    parser.add_argument(
        "--input-lang",
        metavar="<lang>",
        default=settings.default_input_lang,
        help="Input/source language (default: %(default)s)",
    )
    parser.add_argument(
        "--output-lang",
        metavar="<lang>",
        default=settings.default_output_lang,
        help="Output/target language (default: %(default)s)",
    )
    parser.add_argument("--api-key", help="Gemini API key (defaults to GEMINI_API_KEY)")
    parser.add_argument(
        "--image-model",
        metavar="<model>",
        default=settings.gemini_image_model,
        help="Gemini image model used for extraction and rendering (default: %(default)s)",
    )
    parser.add_argument(
        "--text-model",
        metavar="<model>",
        default=settings.gemini_text_model,
        help="Gemini text model used for translation (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v: info, -vv: debug)",
    )
    return parser


def run_command(
    input_path: str,
    options: argparse.Namespace,
    handlers: CommandHandlers = DEFAULT_HANDLERS,
) -> None:
    """선택된 모드 실행 후 결과를 stdout으로 출력"""
    if options.extract:
        rows = handlers.extract_and_translate_text(
            TranslateRequest(
                input_path=input_path,
                input_lang=options.input_lang,
                output_lang=options.output_lang,
                api_key=options.api_key,
                image_model=options.image_model,
                text_model=options.text_model,
            )
        )
        payload = [row.model_dump(by_alias=True, exclude_none=True) for row in rows]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    output_path = handlers.recreate_image_with_translated_text(
        TranslateRequest(
            input_path=input_path,
            output_path=options.output,
            force=options.force,
            input_lang=options.input_lang,
            output_lang=options.output_lang,
            api_key=options.api_key,
            image_model=options.image_model,
            text_model=options.text_model,
        )
    )
    print(output_path)


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI 실행. 실패 시 메시지만 stderr에 출력하고 1 반환"""
    options = build_parser().parse_args(argv)
    _configure_logging(options.verbose)

    try:
        run_command(options.input, options)
    except Exception as e:
        logger.debug("명령 실행 실패", exc_info=True)
        print(str(e), file=sys.stderr)
        return 1

    return 0
