"""
Shared utilities for FolioFlow.

Common functionality used across contexts:
- Date and duration normalization
- PDF access (pdfplumber / PyPDF2)
- Language-model provider access
- Logging and configuration
"""

from folioflow.utils.dates import format_date_range, normalize_duration, parse_date
from folioflow.utils.timestamp import next_item_id, now_exact

__all__ = ["format_date_range", "normalize_duration", "parse_date", "next_item_id", "now_exact"]
