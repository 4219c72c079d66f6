"""Video link normalization."""

import re

_YOUTUBE_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?(?:youtube\.com/watch\?v=|youtu\.be/)([\w-]+)"
)


def to_embed_url(url: str | None) -> str:
    """Rewrite a YouTube watch or short link to its embeddable form.

    Links that do not match are returned unchanged; empty input gives "".
    """
    if not url:
        return ""
    url = url.strip()
    match = _YOUTUBE_RE.match(url)
    if not match:
        return url
    return f"https://www.youtube.com/embed/{match.group(1)}"
