import logging
import sys

from store_sales import settings
from store_sales.converter import convert_text_file_to_json
from store_sales.exceptions import SalesDataError
from store_sales.logger import setup_logger

logger = logging.getLogger(__name__)


def run_conversion() -> int:
    logger.info("--- Converting Raw Sales Export ---")
    try:
        convert_text_file_to_json(settings.RAW_DATA_FILE, settings.SALES_DATA_FILE)
    except SalesDataError as e:
        logger.error(f"❌ Conversion failed: {e}")
        return 1

    logger.info("\n--- Process Finished Successfully ---")
    return 0


if __name__ == "__main__":
    setup_logger(log_level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
    sys.exit(run_conversion())
