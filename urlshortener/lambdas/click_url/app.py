import logging

from urlshortener.dao import url_record_dao
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.services import RedirectResolver
from urlshortener.utils import guarantee_500_response
from urlshortener.constants import INVALID_JSON_BODY, MISSING_SHORTCODE, SHORT_URL_NOT_FOUND, CLICK_SUCCESS
from urlshortener.lambdas.common import parse_body, response_200, response_400, response_404


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to record a click

    Used by client-side redirect pages: records the visit and returns the
    record so the client can navigate to `original_url` itself.

    HTTP responses:
        200: Click recorded
            the record with its incremented click count
        400: Bad client request
            errorCode: INVALID_JSON_BODY | MISSING_SHORTCODE
        404: Unknown short code
            errorCode: SHORT_URL_NOT_FOUND
        500: Internal server error

    Example:
        >>> event = {'body': '{"shortCode": "abc-123_"}'}
        >>> json.loads(lambda_handler(event, None)['body'])['clicks']
        1
    """
    body = parse_body(event)
    if body is None:
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    shortcode = body.get('shortCode')
    if not shortcode or not isinstance(shortcode, str):
        logger.info('Missing "shortCode" in body. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortCode' in JSON body", error_code=MISSING_SHORTCODE)

    record = RedirectResolver(url_record_dao()).resolve(shortcode)
    if record is None:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short code '{shortcode}' doesn't exist", error_code=SHORT_URL_NOT_FOUND)

    logger.info('Click recorded. Responding with 200.', extra={'shortcode': shortcode, 'event': CLICK_SUCCESS})
    return response_200(record.to_dict())
