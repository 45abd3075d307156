"""Per-shell escaping rules, grouped by platform."""
