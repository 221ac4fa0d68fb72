"""
Read-only view over an embed element (iframe, object or video)

A VideoNode borrows a bs4 Tag from a parsed document; the document must
outlive it. Nothing is cached and the tag is never modified.
"""

from typing import Optional

from bs4 import Tag

from video_embeds.config import Config
from video_embeds.provider import VideoProvider
from video_embeds.url_resolver import UrlResolution, resolve_url


class VideoNode:
    """Accessor for the size, source and provider of one embed element"""

    def __init__(self, node: Tag):
        # Callers are expected to pass tags matched by the video selector
        self.node = node

    def __repr__(self) -> str:
        return f"VideoNode(<{self.name}> src={self.get_src()!r})"

    @property
    def name(self) -> Optional[str]:
        return self.node.name

    def attr(self, key: str) -> Optional[str]:
        return self.node.get(key)

    def get_width(self) -> Optional[str]:
        return self.attr('width')

    def get_height(self) -> Optional[str]:
        return self.attr('height')

    def get_src(self) -> Optional[str]:
        """
        Get the declared source of the embed

        <object> elements carry it in a descendant <param name="movie" value="...">,
        the first such param with a value wins. Every other tag uses its src attribute.
        """
        if self.name == 'object':
            params = self.node.find_all('param', attrs={'name': Config.OBJECT_SOURCE_PARAM})
            for param in params:
                value = param.get('value')
                if value is not None:
                    return value
            return None

        return self.attr('src')

    def get_src_url(self, base_url: Optional[str] = None) -> Optional[UrlResolution]:
        """
        Resolve the source against base_url

        Returns:
            None when there is no source, otherwise a resolved or failed UrlResolution
        """
        src = self.get_src()
        if src is None:
            return None
        return resolve_url(src, base_url)

    def get_provider(self, base_url: Optional[str] = None) -> Optional[VideoProvider]:
        """
        Classify the host of the resolved source

        Returns None for a missing source, a source that fails to resolve,
        and a resolved URL without a host.
        """
        resolution = self.get_src_url(base_url)
        if resolution is None or not resolution.ok:
            return None

        host = resolution.host
        if not host:
            return None
        return VideoProvider.from_host(host)
