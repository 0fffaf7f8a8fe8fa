"""Client for the Workers script and route API."""

__version__ = "0.1.0"

from cfworkers.core.container import WorkersAPI  # noqa: E402

__all__ = ["WorkersAPI", "__version__"]
