"""Decode PATH_INFO as ordered key/value parameters."""

from src.path_params.codec import url_decode, url_encode
from src.path_params.config import PathInfoSettings
from src.path_params.errors import ConfigurationError, PathParamsError
from src.path_params.params import PathInfoParams

__all__ = [
    "ConfigurationError",
    "PathInfoParams",
    "PathInfoSettings",
    "PathParamsError",
    "url_decode",
    "url_encode",
]
