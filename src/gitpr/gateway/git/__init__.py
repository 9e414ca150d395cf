"""Git client built on the executor gateway."""

from gitpr.gateway.git.client import GitClient as GitClient
