"""JSON record reader for station and edge exports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, BinaryIO, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import MalformedShape
from .models import Edge, Station

logger = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT", bound=BaseModel)
_RAW_RECORDS = TypeAdapter(list[Any])


def read_stations(source: str | Path | BinaryIO, *, strict: bool = False) -> list[Station]:
    """Read station records from a JSON array.

    Args:
        source: Path to a .json file, or a file-like object containing its bytes.
        strict: Raise on the first invalid record instead of skipping it.
    """
    return _read_records(source, Station, strict=strict)


def read_edges(source: str | Path | BinaryIO, *, strict: bool = False) -> list[Edge]:
    """Read edge records from a JSON array. See ``read_stations``."""
    return _read_records(source, Edge, strict=strict)


def _read_records(
    source: str | Path | BinaryIO,
    model: type[_RecordT],
    *,
    strict: bool,
) -> list[_RecordT]:
    data = _read_bytes(source)
    try:
        raw_records = _RAW_RECORDS.validate_json(data)
    except ValidationError as exc:
        raise MalformedShape(f"Not a JSON array: {_first_error(exc)}") from exc

    records: list[_RecordT] = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(model.model_validate(raw))
        except ValidationError as exc:
            if strict:
                raise MalformedShape(_first_error(exc), index=index) from exc
            logger.warning("Skipping malformed %s record %d: %s", model.__name__, index, _first_error(exc))

    logger.info("Read %d %s records (%d skipped)", len(records), model.__name__, len(raw_records) - len(records))
    return records


def _read_bytes(source: str | Path | BinaryIO) -> bytes:
    if isinstance(source, (str, Path)):
        return Path(source).read_bytes()
    return source.read()


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return f"{loc}: {err['msg']}" if loc else err["msg"]
