"""GeoJSON serialisation and output sinks."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Protocol

from wardgeo.common.errors import OutputWriteError
from wardgeo.common.fs import replace_file_bytes
from wardgeo.common.models import Collection


class Sink(Protocol):
    def write(self, name: str, data: bytes) -> str:
        ...


class FileSink:
    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def write(self, name: str, data: bytes) -> str:
        path = self.directory / name
        try:
            replace_file_bytes(path, data)
        except OSError as exc:
            raise OutputWriteError(str(path), exc.strerror or str(exc)) from exc
        return str(path)


class MemorySink:
    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    def write(self, name: str, data: bytes) -> str:
        self.files[name] = data
        return name


def output_filename(fd_zone: bool, output_config: dict) -> str:
    if fd_zone:
        return output_config["fd_zone_filename"]
    return output_config["non_fd_zone_filename"]


def serialize_collection(collection: Collection, *, indent: int | None = None) -> bytes:
    separators = (",", ":") if indent is None else (",", ": ")
    text = json.dumps(collection.to_dict(), ensure_ascii=False, indent=indent, separators=separators)
    return text.encode("utf-8")


def write_collection(collection: Collection, fd_zone: bool, sink: Sink, output_config: dict) -> str:
    """Serialise ``collection`` and hand it to ``sink`` under the mode's filename.

    Returns the location reported by the sink.
    """
    name = output_filename(fd_zone, output_config)
    data = serialize_collection(collection, indent=output_config.get("indent"))
    return sink.write(name, data)
