"""Partial data values, merging, and sidecar data file loading."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import cast

import orjson
import yaml

# Type aliases for front matter and sidecar data
type DataPrimitive = str | int | float | bool | None
type DataValue = DataPrimitive | list[DataValue] | dict[str, DataValue]
type DataMapping = dict[str, DataValue]

YAML_EXTENSIONS = frozenset({".yaml", ".yml"})


@dataclass(slots=True, frozen=True)
class DataFound:
    """The data file exists and holds a mapping."""

    path: Path
    data: DataMapping


@dataclass(slots=True, frozen=True)
class DataNotFound:
    """The data file does not exist."""

    path: Path


@dataclass(slots=True, frozen=True)
class DataReadFailure:
    """The data file exists but could not be read."""

    path: Path
    error: OSError


@dataclass(slots=True, frozen=True)
class DataParseFailure:
    """The data file was read but its content is not a valid mapping."""

    path: Path
    message: str


type DataLoadResult = DataFound | DataNotFound | DataReadFailure | DataParseFailure


def merge_data(*layers: Mapping[str, DataValue]) -> DataMapping:
    """Shallow-merge data mappings.

    Layers are merged in order; on a key conflict the later layer wins. Nested
    mappings are replaced, not merged. Inputs are not modified.

    Args:
        *layers: Mappings in increasing order of precedence.

    Returns:
        A new merged mapping.
    """
    result: DataMapping = {}
    for layer in layers:
        result.update(layer)
    return result


def _parse_data(raw: bytes, suffix: str) -> object:
    if suffix in YAML_EXTENSIONS:
        return yaml.safe_load(raw)  # pyright: ignore[reportAny]
    return orjson.loads(raw)


def load_data_file(path: Path) -> DataLoadResult:
    """Load a sidecar data file.

    JSON is parsed with orjson; ``.yaml`` and ``.yml`` files with PyYAML. An
    empty YAML document counts as an empty mapping.

    Args:
        path: Path to the data file.

    Returns:
        DataFound with the parsed mapping, DataNotFound if the file does not
        exist, DataReadFailure if it cannot be read, or DataParseFailure if its
        content is malformed or not a mapping.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return DataNotFound(path=path)
    except OSError as e:
        return DataReadFailure(path=path, error=e)

    try:
        parsed = _parse_data(raw, path.suffix.lower())
    except (orjson.JSONDecodeError, yaml.YAMLError) as e:
        return DataParseFailure(path=path, message=str(e))

    if parsed is None and path.suffix.lower() in YAML_EXTENSIONS:
        parsed = {}

    if not isinstance(parsed, dict):
        return DataParseFailure(
            path=path,
            message=f"Data file must contain a mapping: {path}",
        )

    return DataFound(path=path, data=cast("DataMapping", parsed))
