from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from ats_analyzer.core.errors import AnalyzerError
from ats_analyzer.main import configure
from ats_analyzer.schemas import AnalysisRequest
from ats_analyzer.services import run_analysis

EXIT_USAGE = 2


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ats-analyze",
        description="Score a plain-text resume against a job description.",
    )
    parser.add_argument("--resume-file", required=True, help="Path to the resume as UTF-8 text")
    job = parser.add_mutually_exclusive_group(required=True)
    job.add_argument("--job-file", help="Path to the job description as UTF-8 text")
    job.add_argument("--job-text", help="Job description passed inline")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact output)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure()

    try:
        resume_text = _read_text(args.resume_file)
        job_text = _read_text(args.job_file) if args.job_file else args.job_text
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: could not read input: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        request = AnalysisRequest(resume_text=resume_text, job_description_text=job_text)
    except ValidationError as exc:
        print(f"error: invalid input: {exc.errors()[0]['msg']}", file=sys.stderr)
        return EXIT_USAGE

    try:
        report = run_analysis(request)
    except AnalyzerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    indent = args.indent if args.indent > 0 else None
    print(report.model_dump_json(indent=indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
