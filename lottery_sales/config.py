"""
Lottery Sales — Configuration: paths, reference lists, roles, export constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with LOTTERY_DATA_DIR env var for deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("LOTTERY_DATA_DIR", str(Path.home() / "Lottery Sales")))
BASE_FOLDER = _data_dir
SUBMISSIONS_FILE = _data_dir / "submissions.json"
REPORTS_FOLDER = _data_dir / "reports"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Reference lists — these shape export columns and input validation
# ---------------------------------------------------------------------------
LOTTERY_BRANDS = [
    "Supiri Dhana Sampatha",
    "Ada Kotipathi",
    "Lagna Wasanawe",
    "Super Ball",
    "Shanida",
    "Kapruka",
    "Jayoda",
    "Sasiri",
    "Jaya Sampatha",
]

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# Field names of the seven counts on a DailySale, same order as DAYS_OF_WEEK
DAY_FIELDS = [d.lower() for d in DAYS_OF_WEEK]

SRI_LANKA_DISTRICTS = [
    "Ampara",
    "Anuradhapura",
    "Badulla",
    "Batticaloa",
    "Colombo",
    "Galle",
    "Gampaha",
    "Hambantota",
    "Jaffna",
    "Kalutara",
    "Kandy",
    "Kegalle",
    "Kilinochchi",
    "Kurunegala",
    "Mannar",
    "Matale",
    "Matara",
    "Moneragala",
    "Mullaitivu",
    "Nuwara Eliya",
    "Polonnaruwa",
    "Puttalam",
    "Ratnapura",
    "Trincomalee",
    "Vavuniya",
]

SALES_METHODS = ["Counter", "Bicycle", "Other"]

DEALER_NUMBER_LENGTH = 6

# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------
ROLE_ASSISTANT = "SALES_PROMOTION_ASSISTANT"
ROLE_TERRITORY_MANAGER = "TERRITORY_MANAGER"
ROLE_ZONE_MANAGER = "ZONE_MANAGER"

MANAGER_ROLES = {ROLE_TERRITORY_MANAGER, ROLE_ZONE_MANAGER}
ALL_ROLES = MANAGER_ROLES | {ROLE_ASSISTANT}

# ---------------------------------------------------------------------------
# Reporting / export
# ---------------------------------------------------------------------------
EXPORT_BASENAME = "lottery-sales-report"
CSV_FILENAME = f"{EXPORT_BASENAME}.csv"
XLSX_FILENAME = f"{EXPORT_BASENAME}.xlsx"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SUMMARY_SUBMISSION_LIMIT = 50
RECENT_SUBMISSION_LIMIT = 5
DEFAULT_PAGE_SIZE = 10
