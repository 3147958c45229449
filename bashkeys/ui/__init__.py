"""Terminal presentation for bk."""
