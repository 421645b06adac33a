# Core module for redactcheck

from redactcheck.core.aggregator import (
    ReportAggregator,
    SkippedFile,
)
from redactcheck.core.gate import (
    ExitDisposition,
    decide,
)
from redactcheck.core.redaction import (
    BLOCK_PLACEHOLDER,
    PLACEHOLDER,
    Redactor,
)
