from __future__ import annotations

import io
from typing import Optional

from flask import flash, redirect, request, send_file

from ..core.enums import MessageKind

CONFIRM_VALUES = {"1", "yes", "on", "true"}


class FlaskHostActions:
    """HostActions backed by the current Flask request.

    Confirmation comes from the `confirm` form field, which the templates set
    only after the browser's confirm() dialog was accepted.
    """

    def __init__(self, form=None, *, fallback_url: Optional[str] = None):
        self._form = form if form is not None else request.form
        self._fallback_url = fallback_url

    def confirm(self, message: str) -> bool:
        return (self._form.get("confirm") or "").strip().lower() in CONFIRM_VALUES

    def notify(self, kind: MessageKind, text: str) -> None:
        flash(text, MessageKind(kind).value)

    def download(self, artifact):
        return send_file(
            io.BytesIO(artifact.content),
            mimetype=artifact.mimetype,
            as_attachment=True,
            download_name=artifact.filename,
        )

    def reload(self):
        """Send the browser back to the page the form was posted from."""
        referrer = request.referrer
        if referrer and referrer.startswith(request.host_url):
            return redirect(referrer)
        return redirect(self._fallback_url or request.url)
