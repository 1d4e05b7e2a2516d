"""HTTP adapter – async httpx client wrapper."""
from notify_relay.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
