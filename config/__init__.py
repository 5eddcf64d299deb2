"""Default configuration and rule files, shipped as package data."""
