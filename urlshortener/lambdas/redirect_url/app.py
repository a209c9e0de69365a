import logging

from urlshortener.dao import url_record_dao
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.services import RedirectResolver
from urlshortener.utils import get_short_url, guarantee_500_response
from urlshortener.constants import MISSING_SHORTCODE, SHORT_URL_NOT_FOUND, REDIRECT_SUCCESS
from urlshortener.lambdas.common import response_302, response_400, response_404


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the shortcode (records the click)
    - Step 3: Redirect client to target URL

    HTTP responses:
        302: Successful redirect
            headers:
                Location: target URL destination
        400: Bad client request
            message: missing shortcode in path parameters
        404: Unknown short code
            message: short url doesn't exist
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'shortcode': 'abc-123_'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info(
            'Missing "shortcode" in path. Responding with 400.',
            extra={'event': MISSING_SHORTCODE},
        )
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, event))

    # 2- Resolve the shortcode, counting the visit
    record = RedirectResolver(url_record_dao()).resolve(shortcode)
    if record is None:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url {get_short_url(shortcode, event)} doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    # 3- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with 302.',
        extra={'shortcode': shortcode, 'clicks': record.clicks, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=record.original_url)
