"""
Theme media: uploaded files are inlined into the theme as data URLs.
"""
import base64
import logging

from careerpages.core.config import MAX_IMAGE_UPLOAD_MB, MAX_VIDEO_UPLOAD_MB
from careerpages.core.errors import ValidationError

logger = logging.getLogger(__name__)

IMAGE_KINDS = {"logo", "banner"}
VIDEO_KINDS = {"video"}

MB = 1024 * 1024


def max_bytes_for(kind: str) -> int:
    return (MAX_VIDEO_UPLOAD_MB if kind in VIDEO_KINDS else MAX_IMAGE_UPLOAD_MB) * MB


def to_data_url(content: bytes, content_type: str, kind: str) -> str:
    """
    Raises:
        ValidationError: unknown kind, wrong media type, empty or oversized file
    """
    if kind not in IMAGE_KINDS | VIDEO_KINDS:
        raise ValidationError(f"Unknown media kind '{kind}'")

    content_type = (content_type or "").lower()
    expected = "video/" if kind in VIDEO_KINDS else "image/"
    if not content_type.startswith(expected):
        raise ValidationError(f"A {kind} upload must be a {expected.rstrip('/')} file")

    if not content:
        raise ValidationError("Uploaded file is empty")

    limit = max_bytes_for(kind)
    if len(content) > limit:
        raise ValidationError(
            f"File too large. Maximum size is {limit // MB}MB. "
            "For videos, use YouTube or Vimeo links for best performance."
        )

    encoded = base64.b64encode(content).decode("ascii")
    logger.debug(f"Media inlined: kind={kind} type={content_type} bytes={len(content)}")
    return f"data:{content_type};base64,{encoded}"
