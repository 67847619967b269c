"""Small helpers with no application dependencies."""

from contact_manager.shared.utils.datetime import ensure_utc, to_unix_timestamp, utc_now

__all__ = ["ensure_utc", "to_unix_timestamp", "utc_now"]
