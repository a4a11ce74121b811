import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

from store_sales import settings, data_handler
from store_sales.schemas import SaleRecord

logger = logging.getLogger(__name__)


class ReportPipeline(ABC):
    """
    Abstract base class for sales reports (totals, popular items, order stats, etc.).
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(
        self,
        report_type: str,
        source: Optional[Path] = None,
        test_mode: bool = False,
    ):
        self.report_type = report_type
        # Use provided source or default to the configured JSON data file
        self.source = Path(source) if source is not None else settings.SALES_DATA_FILE
        self.test_mode = test_mode

    def run(self) -> list[BaseModel]:
        """
        Orchestrates the pipeline execution. Load and parse errors propagate to the caller.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        records = self.extract()
        if not records:
            logger.warning(f"⚠️ No sales found in {self.source.name}.")

        # --- 2. TRANSFORM ---
        results = self.transform(records)

        # --- 3. LOAD ---
        self.load(results)

        logger.info(f"✅ {self.report_type.capitalize()} Report Finished.\n")
        logger.info("=" * 60)
        return results

    def extract(self) -> list[SaleRecord]:
        """Loads a fresh copy of the sales records for this run."""
        return data_handler.load_sales(self.source)

    @abstractmethod
    def transform(self, records: list[SaleRecord]) -> list[BaseModel]:
        """
        Runs the aggregation for this report.
        Returns a list of output models (one per row of the report).
        """
        pass

    def metadata(self) -> dict[str, Any]:
        """Report parameters sent alongside the rows to the webhook."""
        return {"source": self.source.name}

    def load(self, results: list[BaseModel]):
        """
        Prints, saves and posts the report rows.
        """
        # 1. Print Results
        logger.info(f"\n--- {self.report_type.capitalize()} ---")
        if results:
            for row in results:
                logger.info(row.model_dump(by_alias=True))
        else:
            logger.info("No rows.")

        # 2. Save Outputs (CSV/JSON)
        data_handler.save_outputs(
            results, f"{settings.REPORT_FILENAME_BASE}_{self.report_type}"
        )

        # 3. Post to Webhook
        if not self.test_mode:
            data_handler.post_to_webhook(
                results,
                metadata=self.metadata(),
                report_type=self.report_type,
            )
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
