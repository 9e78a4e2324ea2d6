# -*- coding: utf-8 -*-

import csv
import logging
import os
from pathlib import Path
from typing import Dict, Iterator, Optional, Union

from focusgum.core.errors import LogUnavailableError

logger = logging.getLogger(__name__)

HEADER_FIELDS = (
    "date",
    "start_time",
    "end_time",
    "duration_minutes",
    "tag",
    "description",
)
HEADER_LINE = ",".join(HEADER_FIELDS)


class LogFile:
    """
    The CSV file behind the focus log.
    Every write opens, appends one line and closes.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.is_file()

    def init_header(self) -> None:
        """
        Create the parent directory and the header line if missing.
        A hand-edited file without a final newline gets one, so the next
        record starts on its own line.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if self.path.exists() and self.path.stat().st_size > 0:
                with open(self.path, "rb+") as f:
                    f.seek(-1, os.SEEK_END)
                    if f.read(1) not in (b"\n", b"\r"):
                        f.write(b"\n")
                return
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(HEADER_LINE + "\n")
            logger.info("Created focus log at %s", self.path)
        except OSError as exc:
            raise LogUnavailableError(self.path, f"cannot be created ({exc.strerror or exc})") from exc

    def append_line(self, line: str) -> None:
        if "\n" in line or "\r" in line:
            raise ValueError("A log line must not contain a line break.")
        self.init_header()
        try:
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(line + "\n")
        except OSError as exc:
            raise LogUnavailableError(self.path, f"cannot be appended to ({exc.strerror or exc})") from exc

    def iter_rows(self) -> Iterator[Dict[Optional[str], Optional[str]]]:
        """
        Yield raw rows keyed by the file's own header, one per physical line.
        Columns absent from the header (older files without description) are None;
        extra values go under the None key, as csv.DictReader does.
        A line the csv module rejects yields an empty dict, so a broken
        line never takes its neighbours with it.
        """
        try:
            f = open(self.path, "r", encoding="utf-8", errors="replace", newline="")
        except FileNotFoundError as exc:
            raise LogUnavailableError(self.path, "does not exist") from exc
        except OSError as exc:
            raise LogUnavailableError(self.path, f"cannot be read ({exc.strerror or exc})") from exc

        with f:
            header = None
            for raw in f:
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    values = next(csv.reader([line]), [])
                except csv.Error as exc:
                    logger.debug("Unparsable line in %s: %s", self.path, exc)
                    values = None

                if header is None:
                    header = values or list(HEADER_FIELDS)
                    continue
                if values is None:
                    yield {}
                    continue

                row: Dict[Optional[str], Optional[str]] = dict(zip(header, values))
                for name in header[len(values):]:
                    row[name] = None
                if len(values) > len(header):
                    row[None] = values[len(header):]
                yield row
