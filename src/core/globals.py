import os
from pathlib import Path
from importlib.metadata import PackageNotFoundError, version


try:
    VERSION = version("sectext")
except PackageNotFoundError:
    VERSION = "0.0.0"


BASE_DIR: Path = Path(
    os.environ.get("SECTEXT_BASE_DIR") or Path(__file__).resolve().parent.parent.parent
)
LOGS_DIR = BASE_DIR / "logs"
CONFIGS_DIR = BASE_DIR / "configs"

DEFAULT_PDF_URL = os.environ.get(
    "SECTEXT_DEFAULT_PDF_URL",
    "https://incometaxindia.gov.in/Documents/income-tax-act-1961-as-amended-by-finance-act-2025.pdf",
)
