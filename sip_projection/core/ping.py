"""Health-check payload for the API."""

from sip_projection import __version__
from sip_projection.schemas.ping import PingResponse

SERVICE_NAME = "sip-projection"


def get_ping_response() -> PingResponse:
    return PingResponse(message="pong", service=SERVICE_NAME, version=__version__)
