"""
Convert a DOE high school directory export (JSON array of column-keyed
records) into the ProgramRow[] JSON the advisor serves.

Usage:
    python convert_programs.py doe_export.json
    python convert_programs.py https://example.org/doe_export.json -o advisor/data/programs.json
"""

import argparse
import json
import logging
import sys

import requests

from advisor.logic.adapter import adapt_doe_records
from advisor.programs_source import FALLBACK_PATH

logger = logging.getLogger("convert_programs")


def read_records(source):
    if source.startswith(("http://", "https://")):
        resp = requests.get(source, timeout=30)
        resp.raise_for_status()
        records = resp.json()
    else:
        with open(source, "r", encoding="utf-8") as f:
            records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array of records in {source}")
    return records


def convert(source, output):
    records = read_records(source)
    programs = adapt_doe_records(records)

    rows = [p.model_dump(mode="json", by_alias=True, exclude_none=True) for p in programs]
    with open(output, "w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2, ensure_ascii=False)
        f.write("\n")

    logger.info(f"✅ Wrote {len(rows)} programs to {output}")
    return len(rows)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Convert DOE directory records to ProgramRow JSON")
    parser.add_argument("source", help="Path or URL of a JSON array of DOE records")
    parser.add_argument("-o", "--output", default=FALLBACK_PATH, help="Where to write programs.json")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        convert(args.source, args.output)
    except (OSError, ValueError, requests.RequestException) as e:
        logger.error(f"❌ Conversion failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
