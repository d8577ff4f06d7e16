"""mdagenda - agenda views over tasks embedded in markdown notes."""
