"""Resolvedor de CEP: ViaCEP.

Implementación:
- GET `{base}/ws/{cep}/json/`.
- 200 + cuerpo con `"erro"` => el CEP no existe.
- status != 200, error de red o JSON inválido => `PostalTransportError`.

Notas:
- Una única petición por CEP, sin reintentos (el llamador decide).
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import PostalAddress
from core.errors import PostalTransportError
from core.interfaces.postal_resolver import PostalResolver

logger = logging.getLogger(__name__)


class ViaCepResolver(PostalResolver):
    """Confirma la existencia de un CEP contra viacep.com.br."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _url(self, cep: str) -> str:
        return f"{self._settings.viacep_base_url.rstrip('/')}/ws/{cep}/json/"

    def resolve(self, cep: str) -> PostalAddress:
        url = self._url(cep)
        logger.debug("viacep lookup %s", url)

        try:
            with build_client(self._settings, transport=self._transport) as client:
                response = client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("viacep request failed for %s: %s", cep, exc)
            raise PostalTransportError(f"viacep_request_failed: {exc}") from exc

        if response.status_code != 200:
            logger.warning("viacep returned HTTP %s for %s", response.status_code, cep)
            raise PostalTransportError(
                f"viacep_http_{response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise PostalTransportError("viacep_invalid_json", status_code=200) from exc

        if not isinstance(payload, dict):
            raise PostalTransportError("viacep_unexpected_payload", status_code=200)

        if payload.get("erro"):
            return PostalAddress(found=False, cep=cep)

        try:
            return PostalAddress.model_validate(payload)
        except PydanticValidationError as exc:
            raise PostalTransportError("viacep_unexpected_payload", status_code=200) from exc
