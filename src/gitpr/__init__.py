"""Pull request management for bare git remotes."""
