from __future__ import annotations

import re
from pathlib import Path

from networker.models import EventInfo


_TXT_SUFFIX = re.compile(r"\.txt$", re.IGNORECASE)


def parse_event_from_file_name(file_path: str) -> EventInfo:
    """Derive the event name from the attendee list's file name.

    ``"examples/Tech Mixer on 3-15-25.txt"`` -> ``"Tech Mixer on 3-15-25"``;
    files without a ``.txt`` suffix keep their full base name.
    """
    file_name = Path(file_path).name
    return EventInfo(event_name=_TXT_SUFFIX.sub("", file_name), file_name=file_name)
