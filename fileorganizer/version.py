"""Version information for the file organizer."""

VERSION = "v1.2.1"
APP_NAME = "fileorganizer"


def get_version_info() -> str:
    """Return the application name and version as one line."""
    return f"{APP_NAME} version {VERSION}"