"""
Selection of embed elements in a parsed document
"""

from typing import List, Union

from bs4 import BeautifulSoup, SoupStrainer, Tag

from video_embeds.config import Config
from video_embeds.video_node import VideoNode

VIDEO_TAG_NAMES = Config.VIDEO_TAG_NAMES


def is_video_candidate(tag_name: str) -> bool:
    """
    Check if a tag name is one of the embed tags

    Names are compared exactly; the HTML parsers used with BeautifulSoup
    already lower-case tag names.

    Examples:
        >>> is_video_candidate('iframe')
        True
        >>> is_video_candidate('embed')
        False
    """
    return tag_name in VIDEO_TAG_NAMES


def is_video_tag(tag) -> bool:
    """Filter function for soup.find_all(); only the tag name is consulted"""
    return isinstance(tag, Tag) and not isinstance(tag, BeautifulSoup) and is_video_candidate(tag.name)


def video_strainer() -> SoupStrainer:
    """Matcher usable with find_all() and with BeautifulSoup(..., parse_only=...)"""
    return SoupStrainer(list(VIDEO_TAG_NAMES))


def find_video_nodes(root: Union[BeautifulSoup, Tag]) -> List[VideoNode]:
    """
    Find every embed element in a document or subtree, in document order

    Args:
        root: Parsed document or any tag inside it; the tag itself is included when it matches

    Returns:
        A VideoNode per matching element
    """
    tags = [root] if is_video_tag(root) else []
    tags.extend(root.find_all(list(VIDEO_TAG_NAMES)))
    return [VideoNode(tag) for tag in tags]
