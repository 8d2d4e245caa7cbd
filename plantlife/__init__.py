"""Easy Plant Life site backend."""
