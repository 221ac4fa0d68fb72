"""
Embedded Video Detection Module

Scans an HTML document for iframe/object/video embeds and reports the
size, source and provider of each one.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from video_embeds.config import Config
from video_embeds.provider import VideoProvider
from video_embeds.selector import find_video_nodes
from video_embeds.url_resolver import UrlParseError
from video_embeds.video_node import VideoNode

logger = logging.getLogger(__name__)


@dataclass
class EmbeddedVideo:
    """One embed found in a document"""
    tag: str
    width: Optional[str] = None
    height: Optional[str] = None
    src: Optional[str] = None
    url: Optional[str] = None
    error: Optional[UrlParseError] = None
    provider: Optional[VideoProvider] = None

    @property
    def platform(self) -> str:
        return self.provider.kind.value if self.provider else 'unknown'

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['error'] = self.error.value if self.error else None
        data['provider'] = self.platform
        data['host'] = self.provider.host if self.provider else None
        return data


class EmbeddedVideoDetector:
    """Finds embedded videos in a page and classifies their providers"""

    def __init__(self, base_url: Optional[str] = None, parser: Optional[str] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.base_url = base_url
        self.parser = parser or Config.get_html_parser()

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.parser)

    def describe(self, video_node: VideoNode) -> EmbeddedVideo:
        """Build the record for a single embed element"""
        video = EmbeddedVideo(
            tag=video_node.name,
            width=video_node.get_width(),
            height=video_node.get_height(),
            src=video_node.get_src(),
        )

        resolution = video_node.get_src_url(self.base_url)
        if resolution is None:
            self.logger.info(f"   [NO SOURCE] <{video.tag}> has no source")
            return video

        if not resolution.ok:
            video.error = resolution.error
            self.logger.warning(f"⚠️ [BAD SOURCE] <{video.tag}> src {video.src[:100]!r}: {resolution.error.value}")
            return video

        video.url = resolution.url
        video.provider = video_node.get_provider(self.base_url)
        self.logger.info(f"🎯 [{video.platform.upper()}] <{video.tag}> {video.url[:100]}")
        return video

    def detect(self, document: Union[str, BeautifulSoup, Tag]) -> List[EmbeddedVideo]:
        """
        Detect embedded videos in a document

        Args:
            document: Raw HTML, a parsed soup, or a tag to search under

        Returns:
            One EmbeddedVideo per embed element, in document order
        """
        soup = self.parse(document) if isinstance(document, str) else document

        self.logger.info("🔍 [VIDEO DETECTION] Searching for embedded videos...")
        video_nodes = find_video_nodes(soup)
        self.logger.info(f"🔍 [VIDEO DETECTION] Found {len(video_nodes)} candidate embed(s)")

        videos = [self.describe(video_node) for video_node in video_nodes]

        if videos:
            for platform, count in self.summarize(videos).items():
                self.logger.info(f"   📹 {platform}: {count}")
        else:
            self.logger.info("ℹ️ [NO VIDEOS] No embedded videos found")

        return videos

    @staticmethod
    def summarize(videos: List[EmbeddedVideo]) -> Dict[str, int]:
        """Count videos per platform ('unknown' when there is no provider)"""
        counts: Dict[str, int] = {}
        for video in videos:
            counts[video.platform] = counts.get(video.platform, 0) + 1
        return counts


def detect_embedded_videos(html: str, base_url: Optional[str] = None) -> List[EmbeddedVideo]:
    """Shortcut for EmbeddedVideoDetector(base_url).detect(html)"""
    return EmbeddedVideoDetector(base_url=base_url).detect(html)
