"""Construction ledger dashboard package."""
