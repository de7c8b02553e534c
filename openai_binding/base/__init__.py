"""Cross-cutting infrastructure: errors, cancellation, logging, timeouts, HTTP pool."""
