"""
This module reads rule files, the file-based alternative to declaring a
property's processors inline with `rule(...)`.

A rule file is parsed into a plain Python object (normally a dictionary) by a
reader chosen from the file extension:
- `.toml`: `tomllib`
- `.yaml` / `.yml`: PyYAML's `safe_load`
- `.json`: `json`

`_RuleFileReader` performs the dispatch. Additional formats are plugged in
with a `custom_engine` mapping of extensions to reader callables, e.g.
`{"ini": read_ini}`; a custom reader receives the path and returns the
parsed document. Missing files surface as `FileNotFoundError`, malformed ones
as `ValueError`.
"""

import json
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml

Reader = Callable[[str | Path], Any]


def _parse(path: str | Path, load: Callable, decode_errors, fmt: str, binary=False) -> Any:
    """Open path and parse it with load, normalizing the error types."""
    try:
        if binary:
            with Path(path).open("rb") as f:
                return load(f)
        with Path(path).open(encoding="utf-8") as f:
            return load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {path}") from e
    except decode_errors as e:
        raise ValueError(f"Error decoding {fmt} file: {e}") from e


def _read_toml(path: str | Path) -> dict:
    return _parse(path, tomllib.load, tomllib.TOMLDecodeError, "TOML", binary=True)


def _read_yaml(path: str | Path) -> Any:
    return _parse(path, yaml.safe_load, yaml.YAMLError, "YAML")


def _read_json(path: str | Path) -> Any:
    return _parse(path, json.load, json.JSONDecodeError, "JSON")


_DEFAULT_READERS: dict[str, Reader] = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


class _RuleFileReader:
    """Parse a rule file with the reader registered for its extension.

    Args:
        path (Path | str): The rule file.
        custom_engine (Mapping[str, Reader] | None, optional): Extra readers
            keyed by extension, with or without the leading dot. They take
            precedence over the built-in ones. Defaults to None.

    Raises:
        TypeError: If path, an extension or a reader has the wrong type.
        ValueError: If no reader handles the file extension.
    """

    def __init__(
        self, path: Path | str, custom_engine: Mapping[str, Reader] | None = None
    ) -> None:
        if not isinstance(path, (Path, str)):
            raise TypeError("Path must be a string or a pathlib.Path object.")

        self.path = path
        self.extension = Path(path).suffix.lower()
        self._readers = self._collect_readers(custom_engine or {})

        if self.extension not in self._readers:
            raise ValueError(
                f"Unsupported rule file extension {self.extension!r}. "
                f"Supported extensions are: {sorted(self._readers)}"
            )

    @staticmethod
    def _collect_readers(custom_engine: Mapping[str, Reader]) -> dict[str, Reader]:
        readers = dict(_DEFAULT_READERS)
        for ext, reader in custom_engine.items():
            if not isinstance(ext, str):
                raise TypeError(f"Extension must be a string, got {ext!r}.")
            if not callable(reader):
                raise TypeError(f"Reader must be a callable, got {reader!r}.")
            readers[_normalize_extension(ext)] = reader
        return readers

    def read(self) -> Any:
        return self._readers[self.extension](self.path)
