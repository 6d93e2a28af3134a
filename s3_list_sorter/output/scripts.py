import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .. import config
from ..exceptions import OutputWriteError
from ..models import ObjectRecord
from ..reporting import format_record


def shell_quote(value: str) -> str:
    """Always single-quotes; embedded quotes become '"'"'."""
    return "'" + value.replace("'", "'\"'\"'") + "'"


class ScriptWriter:
    """
    Builds rm.sh and sync.sh: one commented `aws s3` command per record.
    Nothing is executed; the scripts are for a human to review and run.
    """
    def __init__(self,
                 output_dir: Path,
                 bucket: str = config.DEFAULT_BUCKET,
                 sync_dest: str = config.DEFAULT_SYNC_DEST,
                 append: bool = False):
        self.output_dir = output_dir
        self.bucket = bucket
        self.sync_dest = sync_dest
        self.append = append
        self.rm_path = output_dir / config.RM_SCRIPT_NAME
        self.sync_path = output_dir / config.SYNC_SCRIPT_NAME

    def reset(self):
        """Removes scripts left over from a previous run, unless appending."""
        if self.append:
            logging.info("Appending to existing scripts.")
            return

        for path in (self.rm_path, self.sync_path):
            try:
                path.unlink()
                logging.info(f"Deleted file: {path}")
            except FileNotFoundError:
                logging.info(f"File does not exist: {path}")
            except OSError as e:
                raise OutputWriteError(f"Failed to remove {path}: {e}") from e

    def rm_command(self, record: ObjectRecord) -> str:
        return f"aws s3 rm {shell_quote(f's3://{self.bucket}/{record.filename}')}"

    def sync_command(self, record: ObjectRecord) -> str:
        return (
            f"aws s3 sync {shell_quote(f's3://{self.bucket}')} {self.sync_dest} "
            f"--exclude='*' --include={shell_quote(record.filename)}"
        )

    def add_record(self, record: ObjectRecord, now: Optional[datetime] = None):
        comment = f"# {format_record(record, now)}\n"
        self._append(self.rm_path, comment + self.rm_command(record) + "\n")
        self._append(self.sync_path, comment + self.sync_command(record) + "\n")

    def _append(self, path: Path, content: str):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise OutputWriteError(f"Failed to write to file '{path}': {e}") from e
