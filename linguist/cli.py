#!/usr/bin/env python3
"""
Linguist command line.

Examples:
    linguist translate "namaste" --source ne --target en
    linguist document notes.md --target ne --export pdf
    linguist listen --source ne --target en
    linguist history --search hello
    linguist analytics --insights
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from linguist.audio.playback import play
from linguist.audio.recorder import VoiceRecorder
from linguist.config import HISTORY_DIR, MAX_UPLOAD_BYTES
from linguist.core.languages import LANGUAGES
from linguist.errors import LinguistError
from linguist.export import FORMATS, export, export_filename
from linguist.gemini import REFINE_INSTRUCTIONS, GeminiClient
from linguist.history import ActivityLog, FileKeyValueStore
from linguist.ingestion import UploadedFile, prepare_upload
from linguist.orchestrator import TranslationService
from linguist.utils.logging import setup_logging

logger = logging.getLogger(__name__)

LANGUAGE_CODES = [lang.code for lang in LANGUAGES]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linguist", description="Linguist - AI translation assistant"
    )
    parser.add_argument(
        "--history-dir", type=Path, default=HISTORY_DIR, help="Where the activity log is stored"
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("translate", help="Translate text")
    p.add_argument("text", help="Text to translate ('-' reads stdin)")
    p.add_argument("--source", default="ne", help="Source language code or 'auto'")
    p.add_argument("--target", default="en", help="Target language code")
    p.add_argument("--refine", choices=sorted(REFINE_INSTRUCTIONS), help="Refine the result")

    p = sub.add_parser("document", help="Translate a file (text, PDF or image)")
    p.add_argument("path", type=Path)
    p.add_argument("--source", default="auto", help="Source language code or 'auto'")
    p.add_argument("--target", default="ne", help="Target language code")
    p.add_argument("--export", choices=FORMATS, help="Write translated_<name>.<fmt>")
    p.add_argument("--output-dir", type=Path, default=Path("."))

    p = sub.add_parser("refine", help="Polish, formalize, casualize or summarize text")
    p.add_argument("text")
    p.add_argument("--mode", choices=sorted(REFINE_INSTRUCTIONS), default="polish")

    p = sub.add_parser("speak", help="Read text aloud")
    p.add_argument("text")
    p.add_argument("--voice", default=None)

    p = sub.add_parser("listen", help="Record from the microphone, then transcribe/translate")
    p.add_argument("--source", default="ne")
    p.add_argument("--target", default=None, help="Translate the transcript to this language")

    p = sub.add_parser("history", help="Show or clear the activity log")
    p.add_argument("--search", default="")
    p.add_argument("--limit", type=int, default=20)
    p.add_argument("--clear", action="store_true")

    p = sub.add_parser("analytics", help="Usage analytics")
    p.add_argument("--insights", action="store_true", help="Ask the model for insights")

    p = sub.add_parser("languages", help="List supported languages")

    return parser


def _read_text(value: str) -> str:
    return sys.stdin.read() if value == "-" else value


async def _wait_for_enter(prompt: str) -> None:
    await asyncio.to_thread(input, prompt)


async def run(args: argparse.Namespace) -> int:
    log = ActivityLog(FileKeyValueStore(args.history_dir))
    client = GeminiClient()
    service = TranslationService(client, log)

    try:
        if args.command == "translate":
            result = await service.translate_text(_read_text(args.text), args.source, args.target)
            if args.refine:
                result = await service.refine(result, args.refine)
            print(result)

        elif args.command == "document":
            file = UploadedFile.from_path(args.path, max_bytes=MAX_UPLOAD_BYTES)
            upload = prepare_upload(file, MAX_UPLOAD_BYTES)
            result = await service.translate_upload(upload, args.source, args.target)
            if args.export:
                out_path = args.output_dir / export_filename(args.path.name, args.export)
                out_path.write_bytes(export(result, args.export, title=args.path.name))
                print(f"Saved {out_path}", file=sys.stderr)
            print(result)

        elif args.command == "refine":
            print(await service.refine(_read_text(args.text), args.mode))

        elif args.command == "speak":
            buffer = await service.synthesize_speech(args.text, voice=args.voice)
            thread = play(buffer)
            # Keep the process alive until the clip finishes
            await asyncio.to_thread(thread.join)

        elif args.command == "listen":
            translations: list[str] = []

            async def transcribe_and_translate(audio_b64: str, mime_type: str) -> str:
                transcript, translated = await service.translate_speech(
                    audio_b64, mime_type, args.source, args.target
                )
                translations.append(translated)
                return transcript

            recorder = VoiceRecorder(
                transcribe_and_translate if args.target else service.transcribe
            )
            recorder.start()
            await _wait_for_enter("Recording... press Enter to stop. ")
            print(await recorder.stop())
            for translated in translations:
                print(translated)

        elif args.command == "history":
            if args.clear:
                log.clear()
                print("History cleared.")
                return 0
            for record in log.search(args.search)[: args.limit]:
                print(
                    f"[{record.kind.value}] {record.source_lang} -> {record.target_lang}: "
                    f"{record.source_text} => {record.translated_text}"
                )

        elif args.command == "analytics":
            view = log.compute_analytics()
            print(f"Total translations: {view.total_count}")
            print(f"Active languages:   {view.active_languages}")
            print(f"Avg daily (7d):     {view.average_daily}")
            for entry in view.language_distribution:
                print(f"  {entry.name}: {entry.count}")
            for day in view.daily_activity:
                print(f"  {day.date}: {day.count}")
            if args.insights:
                print()
                print(await service.generate_insights(view))

        elif args.command == "languages":
            for lang in LANGUAGES:
                print(f"{lang.code}  {lang.label}")

    except LinguistError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        await client.close()

    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("linguist", level=args.log_level.upper() if args.log_level else None)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
