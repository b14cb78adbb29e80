"""BaseService — shared foundation for all bfn services.

Every service receives the frozen :class:`BfnSettings` at construction
time and reads its section of the configuration from there. Services hold
no other state, so one instance may be shared between threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bfn.config.settings import BfnSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TextService(BaseService):
            def trim(self, value: str | None) -> ServiceResult:
                marks = self._settings.text
                ...
    """

    def __init__(self, settings: BfnSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> BfnSettings:
        return self._settings
