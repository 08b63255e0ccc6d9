"""
src/crawlers/video_feed.py
Draw-video lookup: maps draw dates to YouTube video ids from a channel feed.

The map is held by a VideoFeedCache instance; whoever creates the instance
decides how long it lives (usually one fetch run).
"""
from __future__ import annotations

import re

import requests
from bs4 import BeautifulSoup

from src.utils.config import VIDEO_FEED_TIMEOUT, GameConfig
from src.utils.logger import get_logger

log = get_logger("crawler.video")

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/121.0.0.0 Safari/537.36"
)


class VideoFeedCache:
    """Lazily fetched {draw_date: video_id} map for one feed."""

    def __init__(
        self,
        feed_url: str,
        title_prefix: str = "",
        session: requests.Session | None = None,
        timeout: int = VIDEO_FEED_TIMEOUT,
    ):
        self.feed_url = feed_url
        self.title_re = re.compile(rf"^{re.escape(title_prefix)}(\d{{2}})(\d{{2}})(\d{{4}})$")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", USER_AGENT)
        self._videos: dict[str, str] | None = None

    @classmethod
    def for_game(cls, config: GameConfig, session: requests.Session | None = None) -> "VideoFeedCache | None":
        """Cache for the game's configured feed, or None when the game has no feed."""
        if not config.video_feed:
            return None
        return cls(
            config.video_feed["url"],
            title_prefix=config.video_feed.get("title_prefix", ""),
            session=session,
        )

    def get(self, draw_date: str) -> str | None:
        """Video id for an ISO draw date, or None."""
        return self.videos.get(draw_date)

    @property
    def videos(self) -> dict[str, str]:
        if self._videos is None:
            self._videos = self._load()
        return self._videos

    def clear(self) -> None:
        self._videos = None

    def close(self) -> None:
        """Close the HTTP session if this cache created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "VideoFeedCache":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _load(self) -> dict[str, str]:
        """One GET; a failure leaves this instance with an empty map."""
        try:
            resp = self.session.get(self.feed_url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            log.warning(f"Failed to fetch video feed: {exc}")
            return {}
        videos = self.parse(resp.text)
        log.info(f"Loaded {len(videos)} draw videos from feed")
        return videos

    def parse(self, xml: str) -> dict[str, str]:
        """Extract {YYYY-MM-DD: video_id} from an Atom feed; title is <prefix>MMDDYYYY."""
        soup = BeautifulSoup(xml, "xml")
        videos: dict[str, str] = {}
        for entry in soup.find_all("entry"):
            title = entry.find("title")
            video_id = entry.find("videoId")
            if not title or not video_id:
                continue
            m = self.title_re.match(title.get_text(strip=True))
            if not m:
                continue
            month, day, year = m.groups()
            videos[f"{year}-{month}-{day}"] = video_id.get_text(strip=True)
        return videos
