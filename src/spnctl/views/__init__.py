"""Text views of chain launch data."""

from spnctl.views.entrywriter import write_entries
from spnctl.views.formatters import (
    ACCOUNTS_HEADER,
    format_chain_accounts,
    format_chain_genesis,
    format_chain_info,
    format_chain_peers,
)

__all__ = [
    "ACCOUNTS_HEADER",
    "format_chain_accounts",
    "format_chain_genesis",
    "format_chain_info",
    "format_chain_peers",
    "write_entries",
]
