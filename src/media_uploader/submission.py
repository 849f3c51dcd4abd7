"""Client for the deepfake prediction endpoint."""

from __future__ import annotations

from typing import Optional, Union

import httpx
from pydantic import ValidationError

from .config import settings
from .errors import MalformedResponseError, ServerError, TransportError
from .http import http_client
from .logging import get_logger
from .models import ModelChoice, PredictionResult, SelectedFile, Status

LOGGER = get_logger(__name__)

LOADING_MESSAGE = "Analysing…"
FILE_FIELD = "file"


def describe_result(result: PredictionResult) -> Status:
    """Map a prediction to the status shown to the user.

    A detected deepfake is shown in the error category even though the
    request itself succeeded.
    """

    if result.is_deepfake:
        return Status.error(f"⚠️ Deepfake detected – {result.confidence_percent} %")
    return Status.success(f"✅ Looks real – {result.confidence_percent} % confidence")


class PredictionClient:
    """Posts a selected image to ``/api/predict`` and parses the verdict.

    Usage:
        client = PredictionClient()
        result = await client.predict(file, ModelChoice.V2)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        predict_path: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = (base_url or settings.api_base).rstrip("/")
        self._predict_path = predict_path or settings.predict_path
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{self._predict_path}"

    async def predict(
        self,
        file: SelectedFile,
        model: Union[str, ModelChoice] = ModelChoice.V1,
    ) -> PredictionResult:
        """Submit ``file`` for analysis with the given model version.

        Raises:
            TransportError: the request could not be sent or completed
            ServerError: the service answered with a non-2xx status
            MalformedResponseError: the 2xx body is not the expected JSON
        """

        model = ModelChoice.parse(model)
        files = {FILE_FIELD: (file.name, file.content, file.mime_type)}

        try:
            async with http_client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._predict_path,
                    params={"model": model.value},
                    files=files,
                )
        except httpx.HTTPError as exc:
            LOGGER.warning("Prediction request failed", error=str(exc), file=file.name)
            raise TransportError(str(exc)) from exc

        if not response.is_success:
            LOGGER.warning(
                "Prediction service returned an error",
                status_code=response.status_code,
                model=model.value,
            )
            raise ServerError(response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError(detail=str(exc)) from exc

        try:
            result = PredictionResult.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(detail=str(exc)) from exc

        LOGGER.info(
            "Prediction received",
            model=model.value,
            is_deepfake=result.is_deepfake,
            confidence=result.confidence,
        )
        return result


__all__ = ["FILE_FIELD", "LOADING_MESSAGE", "PredictionClient", "describe_result"]
