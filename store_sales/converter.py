"""
Converts a header-plus-rows delimited text export into the JSON sales data file.

    SKU,Date,Unit Price,Quantity,Total Price
    Death by Chocolate,2019-01-01,180,5,900

becomes

    [{"sKU": "Death by Chocolate", "date": "2019-01-01", "unitPrice": 180, ...}]
"""

import json
import logging
import math
import re
from pathlib import Path
from typing import Any, Union

import pandas as pd

from .utils import load_csv

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def camel_case_header(header: str) -> str:
    """Removes all whitespace and lower-cases the first character ('Unit Price' -> 'unitPrice')."""
    key = _WHITESPACE.sub("", str(header))
    return key[:1].lower() + key[1:]


def coerce_value(value: str) -> Union[int, float, str]:
    """Returns the cell as an int or a finite float when it looks numeric, else the stripped text."""
    text = value.strip()
    if _INTEGER.fullmatch(text):
        return int(text)
    if _DECIMAL.fullmatch(text):
        number = float(text)
        # overflowing exponents such as 1e999
        return number if math.isfinite(number) else text
    return text


def text_frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Maps a raw string DataFrame to storage-format dicts. Cells missing from short rows are omitted."""
    keys = [camel_case_header(column) for column in df.columns]
    records = []
    for row in df.itertuples(index=False, name=None):
        records.append(
            {
                key: coerce_value(value)
                for key, value in zip(keys, row)
                if not pd.isna(value)
            }
        )
    return records


def convert_text_file_to_json(input_path: Path, output_path: Path) -> list[dict[str, Any]]:
    """
    Converts a comma-separated text file to the JSON storage format and writes it to output_path.
    Raises LoadError / ParseError when the input cannot be read or is malformed.
    """
    input_path, output_path = Path(input_path), Path(output_path)
    logger.info(f"Converting {input_path.name} -> {output_path.name}")

    df = load_csv(input_path)
    records = text_frame_to_records(df)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(records, f)

    logger.info(f"✅ Wrote {len(records)} records to {output_path}")
    return records
