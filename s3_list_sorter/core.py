import logging
import sys
from datetime import datetime, UTC
from typing import List, Optional, TextIO

from .config import SorterConfig
from .models import ObjectRecord
from .output.export import write_results
from .output.scripts import ScriptWriter
from .parsing.listing import ListingParser
from .reporting import ReportGenerator
from .sorting import sort_records

class ListingSorterApp:
    def __init__(self, config: SorterConfig):
        self.config = config

    def run(self, stream: Optional[TextIO] = None, now: Optional[datetime] = None) -> List[ObjectRecord]:
        """
        Executes the pipeline.
        1. Parse the listing (bad lines are skipped)
        2. Sort
        3. Report, plus rm/sync scripts when extracting content timestamps
        4. Dump results.json

        Returns the sorted records.
        """
        cfg = self.config
        stream = stream or sys.stdout
        # One reference time so every age in the run agrees
        now = now or datetime.now(UTC)

        parser = ListingParser(extract_content=cfg.extract_content, show_progress=cfg.show_progress)
        records = parser.parse_file(cfg.input_file)

        logging.info(f"Sorting {len(records)} records by {cfg.sort_key} ({cfg.sort_order})")
        records = sort_records(records, cfg.sort_key, cfg.sort_order)

        scripts = None
        if cfg.extract_content:
            scripts = ScriptWriter(cfg.output_dir, cfg.bucket, cfg.sync_dest, append=cfg.append_scripts)
            scripts.reset()

        reporter = ReportGenerator(stream)
        reporter.write_header()
        for record in records:
            reporter.write_record(record, now)
            if scripts is not None:
                scripts.add_record(record, now)

        if cfg.extract_content:
            results_path = write_results(records, cfg.results_path)
            print(f"Results saved to {results_path}", file=stream)

        return records
