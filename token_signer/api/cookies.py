"""Signed cookie helpers for FastAPI applications."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from fastapi import HTTPException, Request, Response

from token_signer.token_signer import TokenSigner, get_instance
from token_signer.utils.dates import duration_seconds

logger = logging.getLogger(__name__)


def set_signed_cookie(
    response: Response,
    name: str,
    payload: Any,
    *,
    signer: TokenSigner | None = None,
    **cookie_kwargs: Any,
) -> str:
    """Sign ``payload`` and store it in cookie ``name``.

    Extra keyword arguments go to ``Response.set_cookie``. Nothing is set when
    the signer has no secret, since the token would be empty.
    """
    signer = signer or get_instance()
    token = signer.generate(payload)
    if not token:
        logger.warning("Not setting cookie %s: signing disabled", name)
        return token
    if signer.max_age is not None and "max_age" not in cookie_kwargs:
        cookie_kwargs["max_age"] = math.ceil(duration_seconds(signer.max_age))
    cookie_kwargs.setdefault("httponly", True)
    response.set_cookie(name, token, **cookie_kwargs)
    return token


def signed_cookie(
    name: str,
    *,
    signer: TokenSigner | None = None,
    status_code: int = 401,
) -> Callable[[Request], Any]:
    """Dependency returning the payload of signed cookie ``name``.

    Missing, tampered, or expired cookies raise ``HTTPException``.
    """

    def reject() -> None:
        raise HTTPException(status_code=status_code, detail="Invalid token")

    def dependency(request: Request) -> Any:
        payloads: list[Any] = []
        (signer or get_instance()).reconstruct(request.cookies.get(name)).when_valid(
            lambda payload, _: payloads.append(payload)
        ).when_invalid(reject)
        return payloads[0]

    return dependency
