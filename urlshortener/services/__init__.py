from urlshortener.services.shortening_service import ShorteningService
from urlshortener.services.redirect_resolver import RedirectResolver


__all__ = ['ShorteningService', 'RedirectResolver']
