"""Scanner states.

The scanner moves between states on each ``next_token()`` call:
- SCANNING: Normal operation, more input may remain
- AT_END: Cursor reached the end of the trimmed program (terminal)
- ERROR: The last call reported an unrecognized character; the next
  call resumes scanning after it

"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Scanner states."""

    SCANNING = auto()
    AT_END = auto()
    ERROR = auto()
