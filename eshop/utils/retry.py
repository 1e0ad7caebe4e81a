# eshop/utils/retry.py
import logging

from sqlalchemy.exc import OperationalError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from eshop.utils.logging import get_logger

logger = get_logger(__name__)


def db_connect_retry(attempts: int):
    """
    Retry tylko dla polaczenia przy starcie (baza w kontenerze moze jeszcze wstawac).
    Operacje requestow nie sa ponawiane.
    """
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
