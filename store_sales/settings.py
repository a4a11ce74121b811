import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
DATA_DIR = BASE_DIR / os.getenv("DATA_DIR", "data")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Filename Configuration ---
RAW_DATA_FILE = DATA_DIR / os.getenv("RAW_DATA_FILENAME", "data.txt")
SALES_DATA_FILE = DATA_DIR / os.getenv("SALES_DATA_FILENAME", "data.json")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME", "sales")

# --- Output Toggles ---
SAVE_CSV_OUTPUT = os.getenv("SAVE_CSV_OUTPUT", "true").lower() == "true"
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() == "true"

# --- Webhook ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
WEBHOOK_TIMEOUT = int(os.getenv("WEBHOOK_TIMEOUT", "15"))

# --- Report Defaults ---
# Used by the interactive menu when the user just presses enter.
DEFAULT_REPORT_YEAR = int(os.getenv("DEFAULT_REPORT_YEAR", "2019"))
DEFAULT_REPORT_MONTH = int(os.getenv("DEFAULT_REPORT_MONTH", "3"))
DEFAULT_ORDER_STATS_ITEM = os.getenv("DEFAULT_ORDER_STATS_ITEM", "Death by Chocolate")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILENAME = os.getenv("LOG_FILENAME", "app.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(5 * 1024 * 1024)))  # 5 MB
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))
