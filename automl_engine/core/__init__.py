"""Cross-cutting pieces: exceptions and logging setup."""
