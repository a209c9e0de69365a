from urlshortener.utils import initialize_logging


initialize_logging()
