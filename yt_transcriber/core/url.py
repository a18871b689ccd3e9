import re
from urllib.parse import urlparse, parse_qs
from yt_transcriber.errors import InvalidUrl

VIDEO_ID_RE = re.compile(r"[A-Za-z0-9_-]{11}")

# path segments that are followed by the video id on youtube.com
_ID_PATH_MARKERS = ("watch", "embed", "v", "shorts", "live", "clip")
_HOST_PREFIXES = ("www.", "m.", "music.")

def is_video_id(value: str) -> bool:
    return bool(VIDEO_ID_RE.fullmatch(value or ""))

def _clean_host(netloc: str) -> str:
    host = netloc.lower().split("@")[-1].split(":")[0]
    for prefix in _HOST_PREFIXES:
        if host.startswith(prefix):
            return host[len(prefix):]
    return host

def extract_video_id(value: str) -> str:
    """Return the 11-character video id for a YouTube URL or bare id.

    Accepts watch URLs on youtube.com and its www/m/music hosts, the
    /shorts/, /live/, /embed/, /v/ and /clip/ paths, and youtu.be short links.
    Raises InvalidUrl when no id can be extracted.
    """
    candidate = (value or "").strip()
    if is_video_id(candidate):
        return candidate

    if "://" not in candidate:
        candidate = f"https://{candidate}"
    try:
        p = urlparse(candidate)
    except ValueError as e:
        raise InvalidUrl(f"Invalid YouTube URL or video ID: {value!r}") from e

    if p.scheme in ("http", "https"):
        host = _clean_host(p.netloc or "")
        parts = [s for s in (p.path or "").split("/") if s]

        if host == "youtu.be" and parts and is_video_id(parts[0]):
            return parts[0]

        if host == "youtube.com":
            v = (parse_qs(p.query or "").get("v") or [None])[0]
            if v and is_video_id(v):
                return v
            for i, part in enumerate(parts[:-1]):
                if part in _ID_PATH_MARKERS and is_video_id(parts[i + 1]):
                    return parts[i + 1]

    raise InvalidUrl(f"Invalid YouTube URL or video ID: {value!r}")
