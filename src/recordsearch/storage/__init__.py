"""RecordSearch Storage Layer - Search engine transport."""
