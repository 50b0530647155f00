import string

DEFAULT_CASES_DIR = "./test-cases"
DEFAULT_CASES_PATTERN = "*.json"

KEYS_FIELD = "keys"

MIN_BASE = 2
MAX_BASE = 36
DIGITS = string.digits + string.ascii_lowercase

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
