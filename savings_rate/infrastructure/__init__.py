"""Infrastructure layer: hledger access, settings and logging."""
