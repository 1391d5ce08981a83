# spigetloom/resources/base_client.py
"""Defines the base class for all Spiget API resource clients."""

from typing import TYPE_CHECKING

from ..log_config import logger

if TYPE_CHECKING:
    from ..client import SpigetClient


class BaseResourceClient:
    """
    Base class for all resource clients.

    Resource clients hold no state of their own; every method forwards to
    `SpigetClient.call` with a fixed operation id.
    """

    def __init__(self, api_client: "SpigetClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of SpigetClient.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")
