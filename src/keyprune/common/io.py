import json
from typing import Any
from pathlib import Path


def json_load(path: Path, lines: bool = False) -> Any:
    """Opens JSON file.

    Args:
        path:
            The source path.

        lines:
            If True, expects JSON Lines format and returns a list of records.
            Blank lines are skipped.
    """

    if not lines:
        with open(path) as file:
            return json.load(file)

    with open(path, "r") as file:
        return [json.loads(each_line) for each_line in file if each_line.strip()]


def json_save(path: Path, data: Any, indent: int = 4, lines: bool = False) -> Path:
    """Writes JSON file.

    Args:
        path:
            The destination path. Missing parent directories are created.

        data:
            The document to write. A list of records if lines is True.

        indent:
            Amount of indentation. Ignored for JSON Lines.

        lines:
            If True, writes in JSON Lines format.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if not lines:
        with open(path, mode="w") as file:
            json.dump(data, file, indent=indent)
            return path

    with open(path, mode='w') as f:
        for item in data:
            f.write(json.dumps(item) + "\n")

    return path
