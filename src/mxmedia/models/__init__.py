"""
Data models for mxmedia.
"""

from mxmedia.models.media_type import MediaType, check_media_type, infer_media_type
from mxmedia.models.media_url import MediaURL

__all__ = [
    "MediaType",
    "MediaURL",
    "check_media_type",
    "infer_media_type",
]
