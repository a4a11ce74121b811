import logging
import sys
from typing import Callable

from store_sales import settings
from store_sales.exceptions import SalesDataError
from store_sales.logger import setup_logger
from store_sales.pipeline import ReportPipeline
from store_sales.pipelines.reports import (
    MonthlySaleReport,
    OrderStatsReport,
    PopularItemsReport,
    RevenueItemsReport,
    TotalSaleReport,
)

logger = logging.getLogger(__name__)


def _ask(prompt: Callable[[str], str], question: str, default):
    """Asks for a value, falling back to the configured default on an empty answer."""
    answer = prompt(f"{question} [{default}]: ").strip()
    if not answer:
        return default
    return type(default)(answer)


# --- Report Registry ---
# Menu option -> label and a factory that builds the pipeline, prompting for
# any parameters it needs.
REPORT_REGISTRY = {
    "1": {
        "label": "Total sales of the store.",
        "factory": lambda prompt: TotalSaleReport(),
    },
    "2": {
        "label": "Sales total for a given month.",
        "factory": lambda prompt: MonthlySaleReport(
            year=_ask(prompt, "Year", settings.DEFAULT_REPORT_YEAR),
            month=_ask(prompt, "Month (1-12)", settings.DEFAULT_REPORT_MONTH),
        ),
    },
    "3": {
        "label": "Most popular item (most quantity sold) in each month.",
        "factory": lambda prompt: PopularItemsReport(),
    },
    "4": {
        "label": "Items generating most revenue in each month.",
        "factory": lambda prompt: RevenueItemsReport(),
    },
    "5": {
        "label": "Min, max and average number of orders of an item each month.",
        "factory": lambda prompt: OrderStatsReport(
            item=_ask(prompt, "Item", settings.DEFAULT_ORDER_STATS_ITEM),
        ),
    },
}


def build_menu() -> str:
    lines = ["", "*****Select an option*****", ""]
    for option, config in REPORT_REGISTRY.items():
        lines.append(f"{option}. {config['label']}")
    lines.append("")
    return "\n".join(lines)


def run_selection(choice: str, prompt: Callable[[str], str] = input) -> int:
    """Builds and runs the report for a menu choice. Returns the process exit code."""
    config = REPORT_REGISTRY.get(choice.strip())
    if config is None:
        logger.warning("Wrong selection. Restart again.")
        return 0

    try:
        pipeline: ReportPipeline = config["factory"](prompt)
    except ValueError as e:
        logger.error(f"❌ Invalid report parameters: {e}")
        return 1

    try:
        pipeline.run()
    except SalesDataError as e:
        logger.error(f"❌ {pipeline.report_type} report failed: {e}")
        return 1
    return 0


def main() -> int:
    setup_logger(log_level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
    print(build_menu())
    choice = input("> ")
    return run_selection(choice)


if __name__ == "__main__":
    sys.exit(main())
