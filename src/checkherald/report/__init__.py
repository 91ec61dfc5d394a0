"""Report assembly for check annotations.

Builds the ordered report sections embedded in an alert notification.
"""

from .assembler import ReportAssembler
from .sections import Report, ReportSection

__all__ = [
    "Report",
    "ReportAssembler",
    "ReportSection",
]
