from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cvpulse.analysis.errors import ResumeValidationError  # noqa: E402
from cvpulse.analysis.generator import select_generator  # noqa: E402
from cvpulse.core.config import settings  # noqa: E402
from cvpulse.schemas.analysis import ResumeInput  # noqa: E402
from cvpulse.services.analysis_service import run_analysis  # noqa: E402


def _read(path: str | None) -> str:
    if not path:
        return ""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a CV Pulse analysis on a plain-text resume.")
    parser.add_argument("resume", help="Path to a plain-text resume, or '-' for stdin")
    parser.add_argument("--jd", default=None, help="Path to a plain-text job description")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for the report")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s", stream=sys.stderr)

    payload = ResumeInput(text=_read(args.resume), job_description=_read(args.jd))
    generator = select_generator(settings)
    try:
        outcome = asyncio.run(run_analysis(payload, generator))
    except ResumeValidationError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    print(json.dumps(outcome.model_dump(mode="json", by_alias=True), indent=args.indent, ensure_ascii=False))
    return 1 if outcome.error else 0


if __name__ == "__main__":
    sys.exit(main())
