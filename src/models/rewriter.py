"""
Rewriter-specific data models

Mode of the line scanner and the counters it reports after a pass.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    """
    Line scanner mode

    PASSTHROUGH echoes content lines; SUPPRESSED drops them until an end
    marker is seen.
    """
    PASSTHROUGH = "passthrough"
    SUPPRESSED = "suppressed"


@dataclass
class RewriteStats:
    """
    Counters collected during one rewrite pass

    Attributes:
        lines_read: Input lines consumed
        lines_emitted: Output lines produced, generated lines included
        lines_suppressed: Input lines dropped inside generated regions
        blocks_generated: Begin markers dispatched successfully
        open_region_line: 1-based line of the begin marker whose region was
                          still open when input ran out, else None
    """
    lines_read: int = 0
    lines_emitted: int = 0
    lines_suppressed: int = 0
    blocks_generated: int = 0
    open_region_line: Optional[int] = None
