"""
Utility functions module.

Instant handling shared by frequencies, indices and the text encoding.

Time Semantics:
- Instants are timezone-aware datetimes at millisecond precision
- Naive datetimes are read in the configured default timezone (UTC)
- Calendar arithmetic happens on wall-clock time in the instant's own zone
"""
