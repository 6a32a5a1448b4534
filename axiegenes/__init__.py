"""Gene parser for 256-bit and 512-bit creature gene codes."""
