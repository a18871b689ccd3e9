import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO
from yt_transcriber.errors import FileWriteError
from yt_transcriber.utils.logger import logger

def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask

def write_output(text: str, path: Optional[str] = None, stream: Optional[TextIO] = None):
    """Write the rendered transcript to stdout or atomically to ``path``.

    For a file the text goes to a temporary sibling first and is moved into
    place with os.replace, so the destination is either fully written or
    untouched.
    """
    if path is None:
        out = stream or sys.stdout
        out.write(text)
        out.flush()
        return

    target = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp_name, 0o666 & ~_umask())
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise FileWriteError(f"Failed to write file - {e}") from e
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.remove(tmp_name)
    logger.debug(f"Wrote {len(text)} characters to {target}")
