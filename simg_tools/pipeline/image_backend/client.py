"""image_backend.client module.

This module defines `BananaAPIClient`, the asynchronous networking boundary
for the optional Nano Banana image generation service. It builds the fixed
generation request for an event title, sends it with a single HTTP POST and
decodes the base64 image payload from the JSON response.

The client never performs file I/O and does not raise: every outcome is
returned as an ``(ok, image_bytes, raw_response)`` tuple so the caller can
fall back to local rendering without any exception handling of its own. The
request is attempted exactly once and bounded by the configured timeout.

Examples
--------
>>> import aiohttp
>>> from simg_tools.pipeline.image_backend.client import BananaAPIClient
>>> class DummyConfig:
...     api_key = "secret"
...     model_key = "model"
...     endpoint = "http://example.com/start/v4"
...     request_timeout = 3
>>> client = BananaAPIClient(DummyConfig())
>>> payload = client.build_payload("GPU Programming Model")
>>> payload["modelInputs"]["width"]
1280
"""

import base64
import binascii
import json
import logging
from typing import Any

import aiohttp

from simg_tools.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_REMOTE_REQUEST_TIMEOUT,
    REMOTE_GUIDANCE_SCALE,
    REMOTE_INFERENCE_STEPS,
    REMOTE_NEGATIVE_PROMPT,
    REMOTE_PROMPT_TEMPLATE,
)
from simg_tools.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def extract_image_bytes(data: Any) -> bytes:
    """Decode the first generated image from a Nano Banana response body.

    Parameters
    ----------
    data : Any
        Parsed JSON response. The image is expected at
        ``modelOutputs[0].image_base64``.

    Returns
    -------
    bytes
        The decoded image.

    Raises
    ------
    ExternalServiceError
        If the payload is missing, empty or not valid base64.
    """
    outputs = data.get("modelOutputs") if isinstance(data, dict) else None
    first = outputs[0] if isinstance(outputs, list) and outputs else None
    encoded = first.get("image_base64") if isinstance(first, dict) else None
    if not isinstance(encoded, str) or not encoded:
        raise ExternalServiceError(
            "Response carries no image payload", transient=False
        )
    try:
        image = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ExternalServiceError(
            "Image payload is not valid base64", transient=False
        ) from exc
    if not image:
        raise ExternalServiceError("Image payload is empty", transient=False)
    return image


class BananaAPIClient:
    r"""Asynchronous client for the Nano Banana image generation endpoint.

    Attributes
    ----------
    config : Any
        Configuration object (normally `BananaConfig`) providing ``api_key``,
        ``model_key``, ``endpoint`` and ``request_timeout``.

    See Also
    --------
    simg_tools.pipeline.thumbnail_generator.composer.RemoteImageBackend :
        Strategy that turns this client's results into thumbnail documents.
    """

    def __init__(self, config: Any) -> None:
        self.config = config

    def build_payload(self, title: str) -> dict[str, Any]:
        """Build the JSON request body for an event title.

        Parameters
        ----------
        title : str
            Event title embedded in the fixed prompt template.

        Returns
        -------
        dict[str, Any]
            Request body with credentials and fixed generation parameters.
        """
        return {
            "apiKey": str(self.config.api_key),
            "modelKey": str(self.config.model_key),
            "modelInputs": {
                "prompt": REMOTE_PROMPT_TEMPLATE.format(title=title),
                "negative_prompt": REMOTE_NEGATIVE_PROMPT,
                "num_inference_steps": REMOTE_INFERENCE_STEPS,
                "guidance_scale": REMOTE_GUIDANCE_SCALE,
                "width": CANVAS_WIDTH,
                "height": CANVAS_HEIGHT,
            },
        }

    async def generate_image(
        self, session: aiohttp.ClientSession, payload: dict[str, Any]
    ) -> tuple[bool, bytes | None, dict[str, Any] | None]:
        r"""Send one generation request and return the decoded image or error details.

        Parameters
        ----------
        session : aiohttp.ClientSession
            Session used for the POST. Used and not closed by this method.
        payload : dict[str, Any]
            Body built by :meth:`build_payload`.

        Returns
        -------
        tuple[bool, bytes or None, dict[str, Any] or None]
            ``(True, image, response)`` on success. On failure ``ok`` is False,
            the image is None and the third element describes the error:
            ``error_type`` for configuration, transport, timeout and payload
            problems, ``status_code``/``error_body`` for HTTP errors and
            ``raw_response_text`` for bodies that are not JSON.

        Notes
        -----
        No exception propagates to the caller and no retry is attempted.
        """
        if not getattr(self.config, "endpoint", ""):
            return (
                False,
                None,
                {
                    "error_type": "ConfigurationError",
                    "message": "Image endpoint not set.",
                },
            )
        timeout = aiohttp.ClientTimeout(
            total=getattr(
                self.config, "request_timeout", DEFAULT_REMOTE_REQUEST_TIMEOUT
            )
        )
        try:
            async with session.post(
                self.config.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            ) as response:
                status = response.status
                text = await response.text()
        except aiohttp.ClientError as e:
            return False, None, {"error_type": "ClientError", "message": str(e)}
        except TimeoutError:
            return False, None, {"error_type": "TimeoutError"}
        except Exception as err:
            return False, None, {"error_type": "Exception", "message": str(err)}

        if status != 200:
            return False, None, {"status_code": status, "error_body": text}
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return False, None, {"raw_response_text": text}
        try:
            image = extract_image_bytes(data)
        except ExternalServiceError as exc:
            logger.debug("Rejected image response: %s", exc)
            return False, None, {"error_type": "ExternalServiceError", **exc.to_dict()}
        return True, image, data
