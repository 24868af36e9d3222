"""Training Data Viewer - browse, filter and paginate chat training data"""

from __future__ import annotations

__version__ = "1.0.0"


# Lazy imports so `import tdviewer` does not pull in FastAPI
def __getattr__(name: str):
    """
    Lazy imports to avoid loading the web stack when only the pipeline is needed.
    """
    if name in ("ViewerState", "PageView"):
        from tdviewer.dataset import state

        return getattr(state, name)

    if name in ("parse_records", "ParseError"):
        from tdviewer.dataset import ingestion

        return getattr(ingestion, name)

    if name == "app":
        from tdviewer.api.app import app

        return app

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ViewerState",
    "PageView",
    "parse_records",
    "ParseError",
    "app",
]
