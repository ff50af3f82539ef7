"""Main entry point for Amalgam"""

import asyncio
import argparse
import logging
import sys
from pathlib import Path

from core.models import SourceFile
from core.exceptions import EmptyBatchError
from orchestrator import IngestionOrchestrator
from stages import AdmissionFilter
from ui.progress import ConsoleProgress
from config import settings


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Amalgam - consolidate CSV and Excel files into one typed table"
    )
    parser.add_argument("files", type=Path, nargs="+", help="Input file paths")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the consolidated result as JSON to this path"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print per-file progress"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    missing = [path for path in args.files if not path.is_file()]
    if missing:
        for path in missing:
            print(f"Error: File not found: {path}")
        return 1

    candidates = [SourceFile.from_path(path) for path in args.files]
    admission = AdmissionFilter().screen(candidates)

    if admission.discarded:
        print("Discarded files:")
        for notice in admission.discarded:
            print(f'  "{notice.file_name}" was discarded: {notice.reason}')

    progress = None if args.quiet else ConsoleProgress()
    orchestrator = IngestionOrchestrator(progress=progress)

    try:
        result = asyncio.run(orchestrator.run(admission.admitted))
    except EmptyBatchError:
        print("\n✗ Please select at least one valid CSV or Excel file to process.")
        return 1

    if result.notices:
        print("\nProcessing notices:")
        for notice in result.notices:
            print(f'  "{notice.file_name}": {notice.reason}')

    if result.is_empty:
        print("\n✗ No data could be consolidated. Please check the file contents and processing notices.")
        return 1

    print(f"\n✓ Consolidated {len(result.rows)} row(s) x {len(result.headers)} column(s)")
    for header in result.headers:
        print(f"  {header}: {result.profile.type_of(header).value}")

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(
            result.model_dump_json(by_alias=True, indent=2),
            encoding="utf-8"
        )
        print(f"\nSaved consolidated result to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
