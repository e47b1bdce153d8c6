"""HTTP clients for the hosted database and the quote service."""
