import json
import shutil
from pathlib import Path

import jsonschema

DATASET_SCHEMA = {
    "type": "array",
    "items": {"type": "object"},
}


def load_dataset(data_file: Path) -> list:
    """
    Read the article dataset. It must be a JSON array of objects.
    """
    with data_file.open("r", encoding="utf-8") as f:
        records = json.load(f)
    jsonschema.validate(instance=records, schema=DATASET_SCHEMA)
    return records


def reset_directory(path: Path) -> Path:
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_page(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(content)
    return path
