"""Exceptions raised by linksaver components."""


class LinkSaverError(Exception):
    """Base class for linksaver errors."""


class StoreError(LinkSaverError):
    """Persisting a link record failed."""
