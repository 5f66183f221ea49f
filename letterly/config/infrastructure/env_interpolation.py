"""${NAME} placeholder handling for settings data read from YAML."""

import os
import re
from collections.abc import Callable, Iterator, Mapping

_PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(
    data: RawValue, environ: Mapping[str, str] | None = None
) -> list[str]:
    """Return every placeholder name absent from environ, first occurrence order."""
    env = os.environ if environ is None else environ
    missing: dict[str, None] = {}
    for text in _strings(data):
        for name in _PLACEHOLDER.findall(text):
            if name not in env:
                missing.setdefault(name)
    return list(missing)


def interpolate(data: RawValue, environ: Mapping[str, str] | None = None) -> RawValue:
    """Return a copy of data with each placeholder replaced by its value.

    Every referenced name must be present; check with collect_missing_vars first.
    """
    env = os.environ if environ is None else environ
    return _map_strings(data, lambda text: _PLACEHOLDER.sub(lambda m: env[m[1]], text))


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data
