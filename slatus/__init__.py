"""slatus -- save named Slack statuses and apply them from the command line."""

__version__ = "0.1.0"
