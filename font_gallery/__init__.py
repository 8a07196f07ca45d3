"""Install, preview and prune Homebrew monospace font casks."""
