"""
URL fragment and query parsing utilities.
"""

from mxmedia.parsing.params import (
    extract_query_params,
    extract_start_time,
    parse_timestamp,
    remove_query_params,
    start_time_params,
    strip_tracking_params,
)
from mxmedia.parsing.temporal import (
    TempFragment,
    add_temp_frag,
    decode_temp_frag,
    encode_temp_frag,
    remove_temp_frag,
)

__all__ = [
    "TempFragment",
    "add_temp_frag",
    "decode_temp_frag",
    "encode_temp_frag",
    "extract_query_params",
    "extract_start_time",
    "parse_timestamp",
    "remove_query_params",
    "remove_temp_frag",
    "start_time_params",
    "strip_tracking_params",
]
