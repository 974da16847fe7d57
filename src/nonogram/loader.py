import json
import os
from typing import Any, Dict, List

import pandas as pd


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads nonogram puzzle records from a file. Handles .parquet, .json and
    .jsonl formats. Returns a list of raw puzzle dictionaries.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    # Case 1: Parquet File (Binary)
    if file_path.endswith(".parquet"):
        df = pd.read_parquet(file_path)
        records = df.to_dict(orient="records")
        return _normalize_records(records)

    # Case 2: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL.
            return _normalize_records(_read_json_lines(text.splitlines()))
        if isinstance(payload, list):
            return _normalize_records([p for p in payload if isinstance(p, dict)])
        if isinstance(payload, dict):
            return _normalize_records([payload])
        return []

    # Case 3: JSONL File (Text)
    with open(file_path, "r", encoding="utf-8") as f:
        return _normalize_records(_read_json_lines(f))


def _read_json_lines(lines) -> List[Dict[str, Any]]:
    data = []
    for line in lines:
        if not line.strip():
            continue
        try:
            obj = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(obj, dict):
            data.append(obj)
    return data


def _normalize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    normalized = []
    for idx, record in enumerate(records):
        record = {str(k): _coerce_jsonable(v) for k, v in record.items()}
        if record.get("id") is None:
            record["id"] = f"row_{idx}"
        normalized.append(record)
    return normalized


def _coerce_jsonable(value):
    # pandas/pyarrow hand back numpy arrays and scalars for list and int columns
    if hasattr(value, "tolist"):
        value = value.tolist()
    if isinstance(value, dict):
        return {k: _coerce_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_coerce_jsonable(v) for v in value]
    return value
