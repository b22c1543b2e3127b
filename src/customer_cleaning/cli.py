from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from customer_cleaning.config import CleaningConfig, load_correction_table
from customer_cleaning.errors import CleaningError
from customer_cleaning.interfaces import CleaningPipeline
from customer_cleaning.models import CleaningSummary, is_missing
from customer_cleaning.runners import LocalCleaningPipeline
from customer_cleaning.schema import REFERENCE_SCHEMA, RecordField, RecordSchema
from customer_cleaning.store import RecordStore

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "clean":
        logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        try:
            clean(
                input_csv=args.input_csv,
                output_dir=args.output_dir,
                corrections_path=args.corrections,
                iqr_multiplier=args.iqr_multiplier,
                drop_on_zero_iqr=not args.keep_on_zero_iqr,
            )
        except (CleaningError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        return 0

    parser.print_help()
    return 0


def clean(
    *,
    input_csv: Path,
    output_dir: Path,
    corrections_path: Path | None,
    iqr_multiplier: float,
    drop_on_zero_iqr: bool,
) -> CleaningSummary:
    corrections = load_correction_table(corrections_path) if corrections_path else {}
    config = CleaningConfig(
        corrections=corrections,
        iqr_multiplier=iqr_multiplier,
        drop_on_zero_iqr=drop_on_zero_iqr,
    )
    schema = RecordSchema.from_mapping(REFERENCE_SCHEMA.field_to_column, missing_tokens=config.missing_tokens)

    store = _read_records_csv(input_csv, schema)
    pipeline: CleaningPipeline = LocalCleaningPipeline.from_config(config)
    result = pipeline.run(store)

    output_dir.mkdir(parents=True, exist_ok=True)
    cleaned_path = output_dir / "cleaned.csv"
    summary_path = output_dir / "summary.json"
    _write_records_csv(cleaned_path, result.store, schema)
    _write_json(summary_path, result.summary.to_dict())

    summary = result.summary
    print(f"Input: {input_csv}")
    print(f"Cleaned: {cleaned_path}")
    print(f"Summary: {summary_path}")
    print("---")
    print("missing_counts=" + ", ".join(f"{name}:{count}" for name, count in summary.missing_counts.items()))
    print(f"duplicate_groups={summary.duplicate_groups}")
    print(f"duplicates_removed={summary.duplicates_removed}")
    print(f"records={summary.records_before}->{summary.records_after}")
    print(f"total_before={summary.total_before:g}")
    print(f"total_after={summary.total_after:g}")
    return summary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="customer-cleaning", description="Customer record cleaning CLI")
    subparsers = parser.add_subparsers(dest="command")

    clean_parser = subparsers.add_parser(
        "clean",
        help="Clean a customer CSV and write the cleaned records + summary",
    )
    clean_parser.add_argument("--input-csv", type=Path, required=True)
    clean_parser.add_argument("--corrections", type=Path, default=None, help="JSON object of incorrect -> correct names")
    clean_parser.add_argument("--output-dir", type=Path, default=Path("data/cleaning_output"))
    clean_parser.add_argument("--iqr-multiplier", type=float, default=1.5)
    clean_parser.add_argument(
        "--keep-on-zero-iqr",
        action="store_true",
        help="Skip outlier removal when all values are identical",
    )
    clean_parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    return parser


def _write_json(path: Path, payload: object) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def _read_records_csv(path: Path, schema: RecordSchema) -> RecordStore:
    with path.open("r", newline="", encoding="utf-8") as handle:
        return schema.parse(csv.DictReader(handle))


def _write_records_csv(path: Path, store: RecordStore, schema: RecordSchema) -> None:
    columns = [schema.column_for(field) for field in RecordField]
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=columns)
        writer.writeheader()
        for record in store:
            row = {}
            for field in RecordField:
                value = getattr(record, field.value)
                row[schema.column_for(field)] = "NA" if is_missing(value) else value
            writer.writerow(row)
    logger.debug("Wrote %d record(s) to %s", len(store), path)


if __name__ == "__main__":
    sys.exit(main())
