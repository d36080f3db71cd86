"""Transport layer: the RemoteCall capability and its HTTP implementation."""

from transport.types import GET, PUT, RemoteCall
from transport.http import HttpRemote, Integration
from transport.channel_api import CATALOG_PATH, CHANNEL_PATH, ChannelApi

__all__ = [
    "GET",
    "PUT",
    "RemoteCall",
    "HttpRemote",
    "Integration",
    "ChannelApi",
    "CATALOG_PATH",
    "CHANNEL_PATH",
]
