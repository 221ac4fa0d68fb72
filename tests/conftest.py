"""
Shared pytest fixtures for video_embeds tests

This file contains fixtures that are available to all test files.
"""

import pytest
from typing import Callable, Dict
from bs4 import BeautifulSoup, Tag


@pytest.fixture
def sample_urls() -> Dict[str, str]:
    """Sample URLs for testing"""
    return {
        'youtube_embed': 'https://www.youtube.com/embed/dQw4w9WgXcQ',
        'youtube_short': 'https://youtu.be/dQw4w9WgXcQ',
        'youtube_protocol_relative': '//www.youtube.com/embed/abc',
        'vimeo_embed': 'https://player.vimeo.com/video/123',
        'dailymotion_embed': 'https://www.dailymotion.com/embed/video/x8abcdef',
        'generic': 'https://cdn.example.net/player/clip.mp4',
        'page': 'https://example.com/page',
    }


@pytest.fixture
def sample_html_embeds() -> Dict[str, str]:
    """Sample embed elements for testing video detection"""
    return {
        'iframe': '<iframe src="http://a.com/x" width="560" height="315"></iframe>',
        'iframe_relative': '<iframe src="/embed/x"></iframe>',
        'iframe_no_src': '<iframe width="100%"></iframe>',
        'video': '<video src="https://cdn.example.net/clip.mp4" width="640" height="360" controls></video>',
        'object': (
            '<object width="425" height="344">'
            '<param name="allowFullScreen" value="true">'
            '<param name="movie" value="http://b.com/y">'
            '<embed src="http://b.com/embed" type="application/x-shockwave-flash">'
            '</object>'
        ),
        'object_no_movie': (
            '<object width="425" height="344" data="http://b.com/z">'
            '<param name="quality" value="high">'
            '</object>'
        ),
    }


@pytest.fixture
def make_tag() -> Callable[[str], Tag]:
    """Parse an HTML snippet and return its first element"""
    def _make_tag(html: str) -> Tag:
        soup = BeautifulSoup(html, 'html.parser')
        return soup.find(True)
    return _make_tag


@pytest.fixture
def mock_html_content() -> str:
    """Sample HTML page with several embedded videos"""
    return """
    <!DOCTYPE html>
    <html>
    <head><title>Test Article</title></head>
    <body>
        <h1>Test Article with Videos</h1>
        <p>This is a test article with embedded videos.</p>

        <div class="video-container">
            <iframe src="//www.youtube.com/embed/dQw4w9WgXcQ" width="560" height="315"></iframe>
        </div>

        <p>Some more content here.</p>

        <div class="another-video">
            <iframe src="https://player.vimeo.com/video/123456789"></iframe>
        </div>

        <object width="400" height="300">
            <param name="movie" value="https://www.dailymotion.com/swf/x8abcdef">
        </object>

        <video src="/media/local.mp4" controls></video>

        <iframe src="http://[broken/embed"></iframe>

        <img src="https://example.com/not-a-video.png">
    </body>
    </html>
    """
