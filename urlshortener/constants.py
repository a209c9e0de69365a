import string
from enum import StrEnum

class Shortcode:
    """Short code generation parameters."""

    # URL-safe alphabet: 26 lowercase + 26 uppercase + 10 digits + '-' and '_'
    ALPHABET = string.ascii_letters + string.digits + '-_'
    LENGTH = 8
    RECORD_ID_LENGTH = 21
    MAX_ATTEMPTS = 5  # regenerations allowed on collision before giving up

class Backend(StrEnum):
    """Supported URL record store backends."""

    MEMORY = 'memory'
    FILE = 'file'
    REDIS = 'redis'

class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'APP_CONFIG_PATH'
        STORE_BACKEND = 'STORE_BACKEND'

# Error codes
EMPTY_INPUT = 'EMPTY_INPUT'
INVALID_URL = 'INVALID_URL'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'

# Log events
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
CLICK_SUCCESS = 'CLICK_SUCCESS'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DELETE_SUCCESS = 'DELETE_SUCCESS'
