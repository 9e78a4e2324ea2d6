# -*- coding: utf-8 -*-

import logging
import re
from datetime import datetime
from typing import Dict, Iterator, Optional

from focusgum.domain.models import DATE_FMT, TIMESTAMP_FMT, LogScan, SessionRecord
from focusgum.storage.log_file import LogFile

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")
_PLAIN_DIGITS = re.compile(r"[0-9]+")


# ---- codec ----
def sanitize_tag(tag: str) -> str:
    """Make a tag safe as a bare CSV field."""
    tag = _LINE_BREAKS.sub(" ", tag or "")
    return tag.replace(",", ";").replace('"', "'")


def flatten_description(description: Optional[str]) -> str:
    return _LINE_BREAKS.sub(" ", description or "")


def format_record(record: SessionRecord) -> str:
    desc = flatten_description(record.description).replace('"', '""')
    return "{},{},{},{:d},{},\"{}\"".format(
        record.date,
        record.start_time,
        record.end_time,
        record.duration_minutes,
        sanitize_tag(record.tag),
        desc,
    )


def build_record(
    start: datetime,
    end: datetime,
    minutes: int,
    tag: str,
    description: Optional[str] = None,
) -> SessionRecord:
    return SessionRecord(
        date=start.strftime(DATE_FMT),
        start_time=start.strftime(TIMESTAMP_FMT),
        end_time=end.strftime(TIMESTAMP_FMT),
        duration_minutes=int(minutes),
        tag=sanitize_tag(tag),
        description=flatten_description(description),
    )


def parse_row(row: Dict[str, Optional[str]]) -> Optional[SessionRecord]:
    """Return None for a row the aggregator must skip."""
    day = (row.get("date") or "").strip()
    minutes = (row.get("duration_minutes") or "").strip()
    if not day or not _PLAIN_DIGITS.fullmatch(minutes):
        return None
    return SessionRecord(
        date=day,
        start_time=row.get("start_time") or "",
        end_time=row.get("end_time") or "",
        duration_minutes=int(minutes),
        tag=row.get("tag") or "",
        description=row.get("description") or "",
    )


class SessionRepo:
    def __init__(self, log: LogFile):
        self.log = log

    @property
    def path(self):
        return self.log.path

    def append(self, record: SessionRecord) -> None:
        self.log.append_line(format_record(record))
        logger.debug("Appended %d min for %r to %s", record.duration_minutes, record.tag, self.log.path)

    def iter_records(self) -> Iterator[Optional[SessionRecord]]:
        for row in self.log.iter_rows():
            yield parse_row(row)

    def scan(self) -> LogScan:
        result = LogScan()
        for record in self.iter_records():
            if record is None:
                result.skipped_rows += 1
                continue
            result.records.append(record)
        if result.skipped_rows:
            logger.debug("Skipped %d malformed row(s) in %s", result.skipped_rows, self.log.path)
        return result
