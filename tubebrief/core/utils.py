"""Shared utility functions for TubeBrief."""

import re

# Matches watch?v=, youtu.be/, embed/, v/, e/ and /<channel>/<path>/ link shapes.
_VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)


def extract_video_id(url: str) -> str | None:
    """Return the 11-character YouTube video id embedded in ``url``, or None."""
    match = _VIDEO_ID_PATTERN.search(url or "")
    return match.group(1) if match else None


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
