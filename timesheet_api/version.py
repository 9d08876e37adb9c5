from importlib import metadata
from pathlib import Path
from typing import Optional

DIST_NAME = "timesheet-api"

vfile = Path(__file__).parent / "VERSION"
file_version = vfile.read_text().strip()
try:
    # show installed package version, if applicable
    pkg_version: Optional[str] = metadata.version(DIST_NAME)
    __version__ = pkg_version
except metadata.PackageNotFoundError:
    # fallback to file_version
    pkg_version = None
    __version__ = file_version


def get_version(pretty: bool = False) -> str:
    if pretty:
        return f"{__package__} {__version__}"
    return __version__[1:] if __version__.startswith("v") else __version__
