"""Pure wrapping engine: no I/O, no global state."""
