"""
Wiring for applications embedding the Saferpay client.

    from saferpay.client import configure_logging, create_driver

    configure_logging()
    driver = create_driver()
    redirect_url = driver.initialize(new_init_params(ACCOUNTID="99867-94913159", AMOUNT="1095", ...))

Gateway, transport and loggers built here are meant to be shared; call
``create_driver`` (or ``TransactionDriver(gateway)``) once per transaction.
"""

import logging
from typing import Optional

from saferpay.audit.logger import LoggerLike
from saferpay.config import Settings, settings as default_settings
from saferpay.engine.driver import TransactionDriver
from saferpay.engine.gateway import SaferpayGateway
from saferpay.transport.base import Transport
from saferpay.transport.httpx_transport import HttpxTransport

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def create_gateway(
    settings: Optional[Settings] = None,
    transport: Optional[Transport] = None,
    logger: Optional[LoggerLike] = None,
) -> SaferpayGateway:
    """Gateway bound to the configured base URL, using httpx unless a transport is given."""
    settings = settings or default_settings
    if transport is None:
        transport = HttpxTransport(timeout=settings.timeout, verify=settings.verify_ssl)
    return SaferpayGateway(
        transport=transport,
        base_url=settings.base_url,
        logger=logger if logger is not None else logging.getLogger("saferpay.gateway"),
    )


def create_driver(
    settings: Optional[Settings] = None,
    transport: Optional[Transport] = None,
    logger: Optional[LoggerLike] = None,
    gateway: Optional[SaferpayGateway] = None,
) -> TransactionDriver:
    """New driver for one transaction, reusing ``gateway`` when given."""
    if gateway is None:
        gateway = create_gateway(settings, transport, logger)
    return TransactionDriver(
        gateway,
        logger=logger if logger is not None else logging.getLogger("saferpay.driver"),
    )
