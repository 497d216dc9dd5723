"""Configuration — settings discovery, TOML sections, and logging setup."""
