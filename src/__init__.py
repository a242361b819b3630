"""netstats source packages."""
