"""Application composition."""

from .container import AppContainer, build_container, get_container

__all__ = ["AppContainer", "build_container", "get_container"]
