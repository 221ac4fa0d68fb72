#!/usr/bin/env python3
"""
Centralized configuration for embedded video detection
"""

import os
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Optional, Tuple


class Config:
    """Centralized configuration constants and environment management"""

    # Tags that carry an embedded player
    VIDEO_TAG_NAMES: Tuple[str, ...] = ('iframe', 'object', 'video')

    # <object> elements point at their media through <param name="movie" value="...">
    OBJECT_SOURCE_PARAM = 'movie'

    # Parser handed to BeautifulSoup when the detector parses raw HTML
    DEFAULT_HTML_PARSER = 'html.parser'

    # Web schemes: backslashes count as slashes, hosts are percent-decoded and IDNA-mapped
    SPECIAL_SCHEMES = frozenset({'http', 'https', 'ws', 'wss', 'ftp', 'file'})

    # Special schemes that must carry a non-empty host
    HOST_REQUIRED_SCHEMES = SPECIAL_SCHEMES - {'file'}

    # Dropped from resolved URLs when written explicitly
    DEFAULT_PORTS = {'http': 80, 'https': 443, 'ws': 80, 'wss': 443, 'ftp': 21}

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @staticmethod
    def get_html_parser() -> str:
        """Get the BeautifulSoup parser name (html.parser, lxml, html5lib)"""
        return os.getenv('VIDEO_EMBEDS_HTML_PARSER', Config.DEFAULT_HTML_PARSER)

    @staticmethod
    def get_log_level() -> int:
        """Get the logging level configured through VIDEO_EMBEDS_LOG_LEVEL"""
        name = os.getenv('VIDEO_EMBEDS_LOG_LEVEL', 'INFO').upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @staticmethod
    def get_provider_keywords() -> Dict[str, Tuple[str, ...]]:
        """
        Get host keywords per provider, in the order they are checked

        A host matches a provider when it contains any of its keywords.
        """
        return {
            'youtube': ('youtube', 'youtu.be'),
            'vimeo': ('vimeo',),
            'dailymotion': ('dailymotion',),
        }

    @staticmethod
    def setup_logging(session_name: str, log_dir: Optional[Path] = None) -> logging.Logger:
        """
        Set up logging for a detection session

        Args:
            session_name: Name for this session (e.g., 'EmbedScan')
            log_dir: Optional directory for a dated log file; console only when omitted

        Returns:
            Configured logger instance
        """
        handlers = [logging.StreamHandler()]
        log_file = None

        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"{session_name.lower()}_{datetime.now().strftime('%Y%m%d')}.log"
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

        logging.basicConfig(
            level=Config.get_log_level(),
            format=Config.LOG_FORMAT,
            handlers=handlers
        )

        logger = logging.getLogger(session_name)
        if log_file:
            logger.info(f"{session_name} initialized. Log file: {log_file}")
        else:
            logger.info(f"{session_name} initialized")

        return logger
