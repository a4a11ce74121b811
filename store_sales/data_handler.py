import json
import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import requests
from pydantic import BaseModel, ValidationError

from . import settings
from . import utils
from .exceptions import LoadError, ParseError
from .schemas import SaleRecord

logger = logging.getLogger(__name__)


def load_sales(file_path: Path) -> list[SaleRecord]:
    """
    Reads the JSON sales data file and validates every entry as a SaleRecord.
    Raises LoadError if the file cannot be read and ParseError if its content is malformed.
    """
    file_path = Path(file_path)
    try:
        raw = file_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"❌ Could not read sales data from {file_path}: {e}")
        raise LoadError(f"Could not read sales data from {file_path}: {e}") from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"❌ {file_path.name} is not valid JSON: {e}")
        raise ParseError(f"{file_path.name} is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        logger.error(f"❌ {file_path.name} must contain a JSON array of sales.")
        raise ParseError(
            f"{file_path.name} must contain a JSON array, got {type(payload).__name__}"
        )

    try:
        records = [SaleRecord.model_validate(row) for row in payload]
    except ValidationError as e:
        logger.error(f"❌ Sales data in {file_path.name} does not match the schema.")
        logger.error(e)
        raise ParseError(f"Invalid sale record in {file_path.name}: {e}") from e

    logger.info(f"✅ Loaded {len(records)} sales from {file_path.name}.")
    return records


def save_outputs(results: list[BaseModel], report_name: str) -> list[Path]:
    """Saves report rows to CSV and/or JSON with dated filenames. Returns the written paths."""
    if not results:
        logger.warning(f"No rows to save for {report_name}.")
        return []

    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()
    rows = [row.model_dump(mode="json", by_alias=True) for row in results]
    written = []

    if settings.SAVE_CSV_OUTPUT:
        csv_path = settings.OUTPUT_DIR / f"{report_name}_{date_suffix}.csv"
        pd.DataFrame(rows).to_csv(csv_path, index=False)
        logger.info(f"✅ Report saved to: {csv_path}")
        written.append(csv_path)

    if settings.SAVE_JSON_OUTPUT:
        json_path = settings.OUTPUT_DIR / f"{report_name}_{date_suffix}.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
        written.append(json_path)

    return written


def post_to_webhook(
    results: list[BaseModel],
    metadata: Optional[dict[str, Any]] = None,
    report_type: str = "sales",
) -> bool:
    """
    Posts the report rows and metadata to the configured webhook.
    Returns True when the webhook accepted the payload.
    """
    if not settings.WEBHOOK_URL:
        logger.info("WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting {report_type} report to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportType": report_type,
        "reportData": [row.model_dump(mode="json", by_alias=True) for row in results],
        "metadata": metadata or {},
    }

    try:
        response = requests.post(
            settings.WEBHOOK_URL, json=payload, timeout=settings.WEBHOOK_TIMEOUT
        )
        response.raise_for_status()
        logger.info("✅ Report successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False
