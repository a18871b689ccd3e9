import html
import re
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Callable, List, Optional
from pydantic import ValidationError
from yt_transcriber.core.source import TranscriptSource
from yt_transcriber.models.transcript import Transcript, Segment
from yt_transcriber.errors import (
    NetworkError,
    ToolUnavailable,
    TranscriptUnavailable,
    VideoUnavailable,
)
from yt_transcriber.utils.logger import logger
from yt_transcriber.config import settings

INSTALL_HINT = "Please install it manually: pip install yt-dlp"

# yt-dlp stderr fragments, matched case-insensitively
NETWORK_MARKERS = (
    "urlopen error",
    "timed out",
    "temporary failure in name resolution",
    "name or service not known",
    "network is unreachable",
    "connection refused",
    "connection reset",
    "getaddrinfo failed",
    "failed to resolve",
    "no route to host",
    "unable to download webpage",
    "http error 5",
)
UNAVAILABLE_MARKERS = ("unavailable", "private", "deleted", "removed")

_TIME_RE = re.compile(
    r"(?P<start>(?:\d+:)?\d{2}:\d{2}\.\d{3})\s*-->\s*(?P<end>(?:\d+:)?\d{2}:\d{2}\.\d{3})"
)
_TAG_RE = re.compile(r"<[^>]+>")
_HEADER_PREFIXES = ("WEBVTT", "Kind:", "Language:")

def _ts_to_sec(ts: str) -> float:
    parts = ts.split(":")
    if len(parts) == 2:
        h = 0
        m, s = parts
    else:
        h, m, s = parts
    return int(h) * 3600 + int(m) * 60 + float(s)

def parse_vtt(content: str) -> List[Segment]:
    """Parse WebVTT cues into segments, dropping tags and empty cues."""
    lines = content.splitlines()
    segments = []
    i = 0
    while i < len(lines):
        m = _TIME_RE.search(lines[i])
        i += 1
        if not m:
            continue
        text_lines = []
        while i < len(lines) and lines[i].strip() and not _TIME_RE.search(lines[i]):
            line = lines[i].strip()
            i += 1
            if line.startswith(_HEADER_PREFIXES):
                continue
            clean = html.unescape(_TAG_RE.sub("", line)).strip()
            if clean:
                text_lines.append(clean)
        text = " ".join(text_lines)
        if not text:
            continue
        try:
            segments.append(Segment(text=text, start=_ts_to_sec(m.group("start")), end=_ts_to_sec(m.group("end"))))
        except ValidationError as e:
            logger.debug(f"Skipping malformed cue at line {i}: {e}")
    return segments

def classify_failure(stderr: str) -> Exception:
    """Map a failed yt-dlp run to the matching pipeline error."""
    lowered = stderr.lower()
    last_line = stderr.strip().splitlines()[-1] if stderr.strip() else "no output"
    if any(marker in lowered for marker in NETWORK_MARKERS):
        return NetworkError(f"Network error while contacting YouTube - {last_line}")
    if any(marker in lowered for marker in UNAVAILABLE_MARKERS):
        return VideoUnavailable("Video is unavailable (private/deleted/restricted)")
    return TranscriptUnavailable(f"yt-dlp failed - {last_line}")

class YtDlpSource(TranscriptSource):
    def __init__(
        self,
        executable: Optional[str] = None,
        cookies_path: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.executable = executable or settings.YTDLP_PATH
        self.cookies_path = cookies_path or settings.COOKIES_PATH
        self.runner = runner

    def _resolve_executable(self) -> str:
        path = shutil.which(self.executable)
        if not path:
            raise ToolUnavailable(f"yt-dlp is required but was not found ({self.executable}). {INSTALL_HINT}")
        return path

    def _build_command(self, executable: str, video_id: str, language: str, out_dir: str) -> List[str]:
        cmd = [
            executable,
            "--write-sub",
            "--write-auto-sub",
            "--sub-lang", language,
            "--sub-format", "vtt",
            "--skip-download",
            "--no-warnings",
            "-o", str(Path(out_dir) / "%(id)s"),
        ]
        if self.cookies_path:
            cmd += ["--cookies", self.cookies_path]
        cmd.append(f"https://www.youtube.com/watch?v={video_id}")
        return cmd

    def _find_vtt(self, out_dir: Path, video_id: str, language: str) -> Optional[Path]:
        for name in (f"{video_id}.{language}.vtt", f"{video_id}.{language}-orig.vtt"):
            path = out_dir / name
            if path.exists():
                return path
        candidates = sorted(out_dir.glob("*.vtt"))
        return candidates[0] if candidates else None

    def fetch(self, video_id: str, language: str) -> Transcript:
        executable = self._resolve_executable()
        with tempfile.TemporaryDirectory(prefix="yt-transcriber-") as tmp:
            cmd = self._build_command(executable, video_id, language, tmp)
            logger.info(f"Fetching '{language}' subtitles for {video_id} via yt-dlp...")
            logger.debug(f"Running: {' '.join(cmd)}")
            try:
                proc = self.runner(cmd, capture_output=True, text=True, encoding="utf-8", errors="replace")
            except (FileNotFoundError, PermissionError) as e:
                raise ToolUnavailable(f"Failed to run yt-dlp - {e}. {INSTALL_HINT}") from e

            if proc.returncode != 0:
                logger.debug(f"yt-dlp exited with {proc.returncode}: {proc.stderr}")
                raise classify_failure(proc.stderr or "")

            vtt_path = self._find_vtt(Path(tmp), video_id, language)
            if vtt_path is None:
                raise TranscriptUnavailable(f"No subtitles available for this video in '{language}' language")
            logger.debug(f"Parsing subtitles from {vtt_path.name}")
            segments = parse_vtt(vtt_path.read_text(encoding="utf-8"))

        if not segments:
            raise TranscriptUnavailable("No transcript content found")
        logger.info(f"Parsed {len(segments)} segments.")
        return Transcript(video_id=video_id, language=language, segments=segments)
