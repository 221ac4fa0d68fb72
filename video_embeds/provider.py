"""
Video hosting provider classification

Maps the host of an embed URL onto one of the known providers, falling
back to an "other" value that keeps the host it was given.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from video_embeds.config import Config


class ProviderKind(str, Enum):
    YOUTUBE = 'youtube'
    VIMEO = 'vimeo'
    DAILYMOTION = 'dailymotion'
    OTHER = 'other'


@dataclass(frozen=True)
class VideoProvider:
    """A classified provider; `host` is only set for ProviderKind.OTHER"""
    kind: ProviderKind
    host: Optional[str] = None

    @classmethod
    def other(cls, host: str) -> 'VideoProvider':
        return cls(ProviderKind.OTHER, host)

    @classmethod
    def from_host(cls, host: str) -> 'VideoProvider':
        """
        Classify a host string

        Matching is substring containment, checked in the order of
        Config.get_provider_keywords(), so 'notyoutube.example.com' is
        Youtube and a host naming two providers gets the first one.

        Args:
            host: Host component of a resolved URL

        Returns:
            The matching provider, or an OTHER provider carrying `host`

        Examples:
            >>> VideoProvider.from_host('youtu.be').kind
            <ProviderKind.YOUTUBE: 'youtube'>
            >>> VideoProvider.from_host('cdn.example.net')
            VideoProvider(kind=<ProviderKind.OTHER: 'other'>, host='cdn.example.net')
        """
        for name, keywords in Config.get_provider_keywords().items():
            if any(keyword in host for keyword in keywords):
                return _KNOWN[ProviderKind(name)]
        return cls.other(host)

    @property
    def is_known(self) -> bool:
        return self.kind is not ProviderKind.OTHER

    def __str__(self) -> str:
        if self.kind is ProviderKind.OTHER:
            return f"other({self.host})"
        return self.kind.value


YOUTUBE = VideoProvider(ProviderKind.YOUTUBE)
VIMEO = VideoProvider(ProviderKind.VIMEO)
DAILYMOTION = VideoProvider(ProviderKind.DAILYMOTION)

_KNOWN = {
    ProviderKind.YOUTUBE: YOUTUBE,
    ProviderKind.VIMEO: VIMEO,
    ProviderKind.DAILYMOTION: DAILYMOTION,
}
