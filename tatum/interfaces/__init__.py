"""Protocol interfaces for the Tatum client."""
from .connector import Connector
from .uploader import Uploader

__all__ = ["Connector", "Uploader"]
