"""
notify_relay – coalescing notification relay.

Import path convention::

    from notify_relay.application.notifications import BatchCoalescer, NotificationItem
    from notify_relay.adapters.fastapi import create_app
    from notify_relay.config.settings import RelaySettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
