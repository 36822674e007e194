"""Storage backends for the point ledger."""
