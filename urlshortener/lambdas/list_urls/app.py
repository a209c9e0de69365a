import logging

from urlshortener.dao import url_record_dao
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.utils import guarantee_500_response
from urlshortener.lambdas.common import response_200


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to list all short URLs

    HTTP responses:
        200: JSON list of records, newest first
        500: Internal server error
    """
    records = url_record_dao().list_all()
    logger.debug('Listing URL records.', extra={'records': len(records)})
    return response_200([record.to_dict() for record in records])
