import configparser
import os
import logging

# Get base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_PATH = os.path.join(BASE_DIR, "config.ini")
LOG_PATH = os.path.join(BASE_DIR, "app.log")

def setup_logging():
    logging.basicConfig(
        filename=LOG_PATH,
        level=logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )

setup_logging()

logger = logging.getLogger(__name__)

# Load config
config = configparser.ConfigParser()
config.read(CONFIG_PATH, encoding="utf-8")

logger.info("Loaded configuration from %s", CONFIG_PATH)
if not config.sections():
    logger.warning("No sections found in config.ini")
    raise RuntimeError("config.ini is missing or empty")

# Settings
MODE = config.get("settings", "mode", fallback="DEBUG")

# Conversion
MASTER_SHEET_NAME = config.get("convert", "master_sheet", fallback="總控")
DEFAULT_EARLY_CUTOFF = config.get("convert", "early_cutoff", fallback="1050")
DEFAULT_LATE_CUTOFF = config.get("convert", "late_cutoff", fallback="1150")
RESULT_SHEET_TITLE = config.get("convert", "result_sheet", fallback="轉換結果")
RESULT_FILENAME = config.get("convert", "result_filename", fallback="converted_result.xlsx")

# Lookup sheets
EMPLOYEE_SHEET_URL = config.get("lookup", "employee_sheet_url", fallback="")
TASK_CODE_SHEET_URL = config.get("lookup", "task_code_sheet_url", fallback="")
LOOKUP_TIMEOUT_SECONDS = config.getfloat("lookup", "timeout_seconds", fallback=15.0)
LOOKUP_MAX_REDIRECTS = config.getint("lookup", "max_redirects", fallback=10)
