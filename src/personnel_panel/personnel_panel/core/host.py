from __future__ import annotations

from typing import Any, Protocol

from .enums import MessageKind


class HostActions(Protocol):
    """Capabilities owned by the hosting environment (browser/HTTP layer).

    Services receive this instead of talking to Flask directly, so confirmation
    prompts, banners and downloads can be faked in tests.
    """

    def confirm(self, message: str) -> bool:
        raise NotImplementedError

    def notify(self, kind: MessageKind, text: str) -> None:
        raise NotImplementedError

    def download(self, artifact) -> Any:
        raise NotImplementedError

    def reload(self) -> Any:
        raise NotImplementedError
