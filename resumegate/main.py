import argparse
import json
import mimetypes
import sys
from pathlib import Path

from resumegate.config.settings import Settings
from resumegate.extraction.exceptions import ExtractionError
from resumegate.extraction.models import RawDocument
from resumegate.logging.logger import Log
from resumegate.processor.exceptions import DocumentRejectedError
from resumegate.processor.processor import build_processor
from resumegate.scoring.models import JobContext
from resumegate.scoring.skills import normalize_skill_list_input

EXIT_EXTRACTION_FAILED = 1
EXIT_REJECTED = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resumegate",
        description="Classify a resume file and print its ATS score bundle as JSON.",
    )
    parser.add_argument("path", type=Path, help="PDF, DOCX or DOC file to score")
    parser.add_argument("--job-title", default="", help="Title of the targeted role")
    parser.add_argument(
        "--job-skills",
        default="",
        help="Comma or newline separated skills required by the role",
    )
    parser.add_argument(
        "--mime-type",
        default="",
        help="Declared MIME type, used when the file name has no extension",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> score one file."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        buffer = args.path.read_bytes()
    except OSError as exc:
        Log.error(f"Cannot read {args.path}: {exc}")
        return EXIT_EXTRACTION_FAILED

    document = RawDocument(
        buffer=buffer,
        filename=args.path.name,
        mime_type=args.mime_type or (mimetypes.guess_type(args.path.name)[0] or ""),
    )
    job = JobContext(
        job_title=args.job_title,
        job_skills=normalize_skill_list_input(args.job_skills),
    )

    processor = build_processor(settings)
    try:
        bundle = processor.process(document, job)
    except ExtractionError as exc:
        print(exc.user_message, file=sys.stderr)
        return EXIT_EXTRACTION_FAILED
    except DocumentRejectedError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_REJECTED

    print(json.dumps(bundle.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
