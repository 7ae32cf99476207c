"""RecordSearch platform - configuration and logging."""
