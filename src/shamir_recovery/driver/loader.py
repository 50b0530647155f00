import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shamir_recovery.common.constants import DEFAULT_CASES_PATTERN, KEYS_FIELD
from shamir_recovery.common.errors import MalformedCase
from shamir_recovery.common.types import Case, CaseKeys, Share


def discover_cases(cases_dir: Path, pattern: str = DEFAULT_CASES_PATTERN) -> list[Path]:
    """
    Lists the case files in a directory, sorted by name.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    cases_dir = Path(cases_dir)
    if not cases_dir.exists():
        raise FileNotFoundError(f"cases directory {cases_dir} does not exist")
    if not cases_dir.is_dir():
        raise NotADirectoryError(f"{cases_dir} is not a directory")
    return sorted(path for path in cases_dir.glob(pattern) if path.is_file())


def _parse_x_label(label: str) -> int:
    if not (label.isascii() and label.isdigit()):
        raise MalformedCase(f"share key {label!r} is not a positive integer")
    try:
        return int(label)
    except ValueError as e:
        raise MalformedCase(f"share key {label[:20]!r}... is too long") from e


def parse_case(case_id: str, data: Any) -> Case:
    """
    Builds a Case from a decoded JSON document.

    Every top-level field except "keys" is a share, keyed by its x-coordinate.
    Shares are ordered by ascending x, whatever their order in the document.
    """
    if not isinstance(data, dict):
        raise MalformedCase("case must be a JSON object")
    if KEYS_FIELD not in data:
        raise MalformedCase(f'missing "{KEYS_FIELD}" block')

    try:
        keys = CaseKeys.model_validate(data[KEYS_FIELD])
        shares = []
        for label, descriptor in data.items():
            if label == KEYS_FIELD:
                continue
            if not isinstance(descriptor, dict):
                raise MalformedCase(f"share {label!r} must be an object")
            shares.append(
                Share(
                    x_label=_parse_x_label(label),
                    base=descriptor.get("base"),
                    raw_value=descriptor.get("value"),
                )
            )
        shares.sort(key=lambda share: share.x_label)
        return Case(case_id=case_id, keys=keys, shares=shares)
    except ValidationError as e:
        raise MalformedCase(str(e)) from e


def load_case(path: Path) -> Case:
    path = Path(path)
    try:
        # integers stay digit strings; the decoder and pydantic convert them
        data = json.loads(path.read_text(encoding="utf-8"), parse_int=str)
    except UnicodeDecodeError as e:
        raise MalformedCase(f"{path.name} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise MalformedCase(f"invalid JSON in {path.name}: {e}") from e
    return parse_case(path.name, data)
