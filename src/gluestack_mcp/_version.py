"""Version of the installed gluestack-mcp distribution."""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    try:
        return version("gluestack-mcp")
    except PackageNotFoundError:
        return "0.0.0"
