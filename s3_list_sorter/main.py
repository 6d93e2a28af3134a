import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .config import SorterConfig
from .core import ListingSorterApp
from .exceptions import ListingSorterError

def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Logs go to stderr (and optionally a file); stdout carries the report."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
        force=True,
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Sort and report an `aws s3 ls` listing")

    p.add_argument("-file", "--file", dest="file", type=Path, default=config.DEFAULT_INPUT_FILE,
                   help="Path to the input file")
    p.add_argument("-sort", "--sort", dest="sort", default=config.DEFAULT_SORT_KEY,
                   help="Sort by 'timestamp' or 's3' modification time")
    p.add_argument("-order", "--order", dest="order", default=config.DEFAULT_SORT_ORDER,
                   help="Sort order: 'asc' or 'desc'")

    p.add_argument("--output-dir", type=Path, default=Path("."),
                   help="Directory for rm.sh, sync.sh and results.json")
    p.add_argument("--bucket", default=config.DEFAULT_BUCKET, help="Bucket used in generated commands")
    p.add_argument("--sync-dest", default=config.DEFAULT_SYNC_DEST, help="Local target for sync commands")
    p.add_argument("--append-scripts", action="store_true",
                   help="Append to existing rm.sh/sync.sh instead of replacing them")
    p.add_argument("--report-only", action="store_true",
                   help="Only print the report: no filename timestamps, scripts or JSON")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")

    p.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)

def build_config(args) -> SorterConfig:
    return SorterConfig(
        input_file=args.file,
        sort_key=args.sort,
        sort_order=args.order,
        output_dir=args.output_dir,
        bucket=args.bucket,
        sync_dest=args.sync_dest,
        extract_content=not args.report_only,
        append_scripts=args.append_scripts,
        show_progress=not args.no_progress,
    )

def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        # Validates sort key/order before anything is read or written
        cfg = build_config(args)
        ListingSorterApp(cfg).run()
    except ListingSorterError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error while sorting listing.")
        sys.exit(1)

if __name__ == "__main__":
    main()
