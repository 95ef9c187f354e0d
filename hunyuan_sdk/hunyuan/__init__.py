"""Hunyuan action client: credential/region types, builder, client."""

from .credential import Credential, Region
from .client import Client
from .builder import ClientBuilder

__all__ = ["Credential", "Region", "Client", "ClientBuilder"]
