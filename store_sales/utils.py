import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from .exceptions import LoadError, ParseError

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def load_csv(file_path: Path, sep: str = ",") -> pd.DataFrame:
    """
    Reads a delimited text file with every cell kept as a raw string.
    It will attempt to read the file in the following order:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte.
    Missing cells in short rows come back as NaN.
    """
    read_options = dict(
        sep=sep,
        dtype=str,
        index_col=False,
        keep_default_na=False,
        skip_blank_lines=True,
    )
    try:
        try:
            return pd.read_csv(file_path, encoding="utf-8-sig", **read_options)
        except UnicodeDecodeError:
            logger.info(
                f"INFO: UTF-8 decoding failed for {Path(file_path).name}. Retrying with 'latin-1'."
            )
            return pd.read_csv(file_path, encoding="latin-1", **read_options)

    except OSError as e:
        # FileNotFoundError, PermissionError, IsADirectoryError...
        logger.error(f"❌ Could not read {file_path}: {e}")
        raise LoadError(f"Could not read {file_path}: {e}") from e

    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"❌ Malformed delimited text in {Path(file_path).name}: {e}")
        raise ParseError(f"Malformed delimited text in {file_path}: {e}") from e
