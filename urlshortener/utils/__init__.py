from urlshortener.utils.config import app_env, app_name, project_root, app_prefix, config_path, load_config
from urlshortener.utils.helpers import base_url, get_short_url, running_locally, guarantee_500_response
from urlshortener.utils.shortener import generate_shortcode, generate_record_id
from urlshortener.utils.urls import normalize_url, validate_url
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'generate_record_id',
    'normalize_url',
    'validate_url',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'config_path',
    'load_config',
    'base_url',
    'get_short_url',
    'running_locally',
    'guarantee_500_response',
    'initialize_logging',
]
