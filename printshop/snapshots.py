import json
from pathlib import Path
from typing import Any


def write_json_to_file(data: Any, path: Path) -> None:
    """Write `data` as pretty-printed JSON, creating parent folders as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
