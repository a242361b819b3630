"""OS interface counter access."""
