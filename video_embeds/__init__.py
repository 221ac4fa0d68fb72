"""
Embedded video detection for parsed HTML documents
"""

from video_embeds.provider import ProviderKind, VideoProvider, YOUTUBE, VIMEO, DAILYMOTION
from video_embeds.url_resolver import UrlParseError, UrlResolution, resolve_url
from video_embeds.video_node import VideoNode
from video_embeds.selector import (
    VIDEO_TAG_NAMES,
    find_video_nodes,
    is_video_candidate,
    is_video_tag,
    video_strainer,
)
from video_embeds.detector import EmbeddedVideo, EmbeddedVideoDetector, detect_embedded_videos

__all__ = [
    'ProviderKind', 'VideoProvider', 'YOUTUBE', 'VIMEO', 'DAILYMOTION',
    'UrlParseError', 'UrlResolution', 'resolve_url',
    'VideoNode',
    'VIDEO_TAG_NAMES', 'find_video_nodes', 'is_video_candidate', 'is_video_tag', 'video_strainer',
    'EmbeddedVideo', 'EmbeddedVideoDetector', 'detect_embedded_videos',
]
