"""Factory for creating transports."""

from recast.config import Settings, get_settings

from .base import Transport
from .http import HttpTransport
from .replay import ReplayTransport


def get_transport(settings: Settings | None = None) -> Transport:
    """Get the configured transport.

    Uses RECAST_TRANSPORT from settings to determine which transport to
    instantiate. The token, language, endpoint and timeout are handed to the
    transport here; nothing reads them later.

    Args:
        settings: Settings to use (defaults to the environment)

    Returns:
        Configured transport instance
    """
    if settings is None:
        settings = get_settings()

    # Settings already validates the transport name
    if settings.transport == "http":
        return HttpTransport(
            token=settings.token,
            language=settings.language,
            api_url=settings.api_url,
            timeout=settings.timeout,
        )
    elif settings.transport == "replay":
        return ReplayTransport.from_file(settings.replay_file)
    else:
        # This should never happen due to validation in settings
        raise ValueError(
            f"Unknown transport: {settings.transport}. Valid options: http, replay"
        )
