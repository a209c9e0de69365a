import logging

from urlshortener.dao import url_record_dao
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.services import ShorteningService
from urlshortener.exceptions import EmptyInputError, InvalidUrlError
from urlshortener.utils import get_short_url, guarantee_500_response
from urlshortener.constants import EMPTY_INPUT, INVALID_URL, INVALID_JSON_BODY, SHORTEN_SUCCESS
from urlshortener.lambdas.common import parse_body, response_200, response_400


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract the URL from the JSON request body
    - Step 2: Validate, normalize and store it (via ShorteningService)
    - Step 3: Respond with the new record and its public short URL

    HTTP responses:
        200: Successful URL shortening
            id, original_url, short_code, created_at, clicks: the stored record
            short_url: newly generated short url
        400: Bad client request
            message: cause of bad request (invalid JSON, empty, non-string or invalid URL)
            errorCode: INVALID_JSON_BODY | EMPTY_INPUT | INVALID_URL
        500: Internal server error

    Example:
        >>> event = {'body': '{"url": "example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['original_url']
        'https://example.com'
    """
    # 1- Extract original URL from request body
    body = parse_body(event)
    if body is None:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)
    raw_url = body.get('url')
    if raw_url is None:
        raw_url = ''
    elif not isinstance(raw_url, str):
        logger.info('Non-string URL submitted. Responding with 400.', extra={'event': INVALID_URL})
        return response_400(message="'url' must be a string", error_code=INVALID_URL)

    # 2- Validate, normalize and store the URL
    service = ShorteningService(url_record_dao())
    try:
        record = service.shorten(raw_url)
    except EmptyInputError:
        logger.info('Empty URL submitted. Responding with 400.', extra={'event': EMPTY_INPUT})
        return response_400(message="'url' must not be empty", error_code=EMPTY_INPUT)
    except InvalidUrlError:
        logger.info('Invalid URL submitted. Responding with 400.', extra={'event': INVALID_URL, 'url': raw_url})
        return response_400(message=f"'{raw_url.strip()}' is not a valid URL", error_code=INVALID_URL)

    # 3- Return the new record to the client
    short_url = get_short_url(record.short_code, event)
    logger.info(
        'Successfully shortened URL. Responding with 200.',
        extra={'shortcode': record.short_code, 'event': SHORTEN_SUCCESS},
    )
    return response_200({**record.to_dict(), 'short_url': short_url})
