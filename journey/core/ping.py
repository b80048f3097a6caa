"""Liveness answer for the projection API."""

from journey import __version__


def get_ping_message() -> str:
    return "pong"


def get_version() -> str:
    return __version__
