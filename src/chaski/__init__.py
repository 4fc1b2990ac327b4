"""Chaski — typed, validated access to CGI parameters.

Carries values between request and handler without letting raw strings,
sequential database IDs, or foreign redirect targets through.
"""

from chaski.cgi import Cgi
from chaski.config import ChaskiConfig, load_config
from chaski.decoder import DecoderRing
from chaski.errors import ChaskiError, SecurityError, ValidationError
from chaski.interface import CgiInterface

__version__ = "0.1.0"

__all__ = [
    "Cgi",
    "CgiInterface",
    "ChaskiConfig",
    "ChaskiError",
    "DecoderRing",
    "SecurityError",
    "ValidationError",
    "load_config",
]
