"""Write text payloads to disk."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from vocab_book.errors import DestinationUnavailable, WriteIncomplete

log = logging.getLogger("vocab_book.storage")


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> None:
    """Create or truncate ``path`` and write ``content`` to it.

    The data is flushed and fsynced before returning. An existing file is
    overwritten without asking. If the write fails part way, the partial
    file is removed before WriteIncomplete is raised.
    """
    path = Path(path)
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as e:
        raise WriteIncomplete(WriteIncomplete.prefix + str(e)) from e

    try:
        f = open(path, "wb")
    except OSError as e:
        log.warning("Cannot create %s: %s", path, e)
        raise DestinationUnavailable(DestinationUnavailable.prefix + str(e)) from e

    try:
        with f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        log.warning("Write to %s failed: %s", path, e)
        try:
            path.unlink(missing_ok=True)
        except OSError as unlink_err:
            log.warning("Could not remove partial file %s: %s", path, unlink_err)
        raise WriteIncomplete(WriteIncomplete.prefix + str(e)) from e

    log.info("Wrote %d bytes to %s", len(data), path)
