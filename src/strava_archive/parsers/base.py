"""Shared CSV decoding used by the per-file parsers."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .headers import normalize_headers

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class EmptyFileError(ValueError):
    """Raised when an export file has no header row."""


class MissingColumnsError(ValueError):
    """Raised when a header lacks columns the record type requires."""


class RecordDecodeError(ValueError):
    """A data row that could not be turned into a typed record."""

    def __init__(
        self,
        *,
        column: Optional[str],
        index: Optional[int],
        value: Optional[str],
        reason: str,
        row: Sequence[str],
        line: Optional[int] = None,
        path: Optional[Path] = None,
    ) -> None:
        self.column = column
        self.index = index
        self.value = value
        self.reason = reason
        self.row = list(row)
        self.line = line
        self.path = path
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = ""
        if self.path is not None:
            location = f"{self.path}:{self.line}: " if self.line is not None else f"{self.path}: "
        elif self.line is not None:
            location = f"line {self.line}: "
        column = f"'{self.column}'" if self.column is not None else "<none>"
        return (
            f"{location}column {column} (index {self.index}) value {self.value!r}: "
            f"{self.reason}; row: {','.join(self.row)}"
        )


def required_columns(model: Type[BaseModel]) -> List[str]:
    """Column labels that must appear in the header for ``model`` to decode."""
    return [info.alias or name for name, info in model.model_fields.items() if info.is_required()]


def bound_columns(model: Type[BaseModel]) -> set[str]:
    return {info.alias or name for name, info in model.model_fields.items()}


def ensure_required_columns(header: Iterable[str], model: Type[BaseModel], source: str) -> None:
    """Raise if the expected columns are missing so ingestion fails fast."""
    present = set(header)
    missing = [column for column in required_columns(model) if column not in present]
    if missing:
        raise MissingColumnsError(f"{source} export missing required columns: {missing}")


def decode_row(
    header: Sequence[str],
    row: Sequence[str],
    model: Type[RecordT],
    *,
    line: Optional[int] = None,
    path: Optional[Path] = None,
) -> RecordT:
    """Decode one data row against a normalized header.

    Cells are matched to fields by column label, so extra or reordered columns are fine.
    A short row fails on the first column it lacks; any conversion failure is reported
    with the column label, its index and the raw cell.
    """
    if len(row) < len(header):
        index = len(row)
        raise RecordDecodeError(
            column=header[index],
            index=index,
            value=None,
            reason=f"row has {len(row)} columns but the header has {len(header)}",
            row=row,
            line=line,
            path=path,
        )
    if len(row) > len(header):
        index = len(header)
        raise RecordDecodeError(
            column=None,
            index=index,
            value=row[index],
            reason=f"row has {len(row)} columns but the header has {len(header)}",
            row=row,
            line=line,
            path=path,
        )

    wanted = bound_columns(model)
    payload = {label: cell for label, cell in zip(header, row) if label in wanted}
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        error = exc.errors()[0]
        column = str(error["loc"][0]) if error["loc"] else None
        index = list(header).index(column) if column in header else None
        value = error.get("input") if index is not None else None
        raise RecordDecodeError(
            column=column,
            index=index,
            value=value if isinstance(value, str) else None,
            reason=error["msg"],
            row=row,
            line=line,
            path=path,
        ) from exc


def decode_csv(path: str | Path, model: Type[RecordT], source: str) -> List[RecordT]:
    """Read a whole export file into records; any bad row fails the file."""
    path = Path(path)
    records: List[RecordT] = []
    with path.open("r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.reader(handle)
        raw_header = next(reader, None)
        if raw_header is None:
            raise EmptyFileError(f"{source} export {path} has no header row")
        header = normalize_headers(raw_header)
        ensure_required_columns(header, model, source)
        for row in reader:
            if not row:
                continue
            records.append(decode_row(header, row, model, line=reader.line_num, path=path))
    logger.info("Parsed %d %s records from %s", len(records), source, path)
    return records
