"""Infrastructure — logging setup shared by the runtime and the HTTP host."""
