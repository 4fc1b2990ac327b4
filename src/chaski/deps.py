"""FastAPI dependencies for Chaski."""

from __future__ import annotations

from fastapi import Request

from chaski.cgi import Cgi
from chaski.config import ChaskiConfig
from chaski.decoder import DecoderRing


def get_decoder(request: Request) -> DecoderRing:
    """Get the decoder ring from app state."""
    return request.app.state.decoder


def get_cgi(request: Request) -> Cgi:
    """Build a parameter accessor over the request's query string.

    The leader comes from config, or from the request's base URL when
    config leaves it empty.
    """
    config: ChaskiConfig = request.app.state.config
    leader = config.leader or str(request.base_url).rstrip("/")
    return Cgi(request.query_params, get_decoder(request), leader=leader)
