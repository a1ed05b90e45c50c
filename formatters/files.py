from __future__ import annotations

import os
import tempfile


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_text_atomic(output_path: str, text: str) -> None:
    """Write ``text`` next to ``output_path`` and rename it into place.

    Readers never see a half written file; on failure the temporary file is
    removed and the previous contents (if any) are left untouched.
    """
    directory = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        # mkstemp creates 0600; give the result the mode a plain open() would
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, output_path)
    except BaseException:
        os.unlink(tmp_path)
        raise
