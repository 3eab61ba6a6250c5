"""Domain types, ports and use cases; no I/O lives here."""
