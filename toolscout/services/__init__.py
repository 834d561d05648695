"""Feature services exposed over HTTP."""
