"""Helpers around the path-info parameter store."""

from src.path_params.utils.debug_table import render_params_table
from src.path_params.utils.event_helpers import (
    ApiGatewayPathInfoSource,
    EnvironPathInfoSource,
    PathInfoSource,
    get_path_info,
)
from src.path_params.utils.logging_utils import sanitize_for_log

__all__ = [
    "ApiGatewayPathInfoSource",
    "EnvironPathInfoSource",
    "PathInfoSource",
    "get_path_info",
    "render_params_table",
    "sanitize_for_log",
]
