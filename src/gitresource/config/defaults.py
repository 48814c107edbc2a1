"""Built-in default configuration for gitresource."""

# Default configuration that serves as the base for all other configs
DEFAULT_CONFIG = {
    "download_root": "~/.cache/gitresource/downloads",
    "api_url": "https://api.github.com",
    "timeout_seconds": 30.0,
    "user_agent": "gitresource/0.1",
    "log_level": "INFO",
}
