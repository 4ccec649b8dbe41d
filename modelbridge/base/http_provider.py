"""Shared HTTP transport for every provider family.

Purpose:
    ``HttpChatProvider`` owns the parts of a chat call that do not depend on
    the provider's wire format: credential check, HTTP exchange, status
    handling, streaming versus single-document parsing, cancellation and
    structured logging. Families only describe their endpoints, payload
    shape, headers, response schema and stream decoder.

External dependencies:
    - ``httpx`` (async client; ``MockTransport`` in tests).
    - ``pydantic`` response schemas under ``modelbridge.base.schemas``.

Timeout strategy:
    - Generation calls run without a deadline; they end when the provider
      closes the body or the caller cancels.
    - Model listings run under ``operation_timeout`` with the discovery
      deadline from ``get_timeout_config()`` (2 s by default).

Retries and error handling:
    - No retries. Non-2xx responses raise ``ProviderHttpError`` with a body
      excerpt. Transport failures are classified with ``classify_exception``
      and wrapped in ``ProviderError``.
    - Listing failures never raise; they degrade to an empty list logged at
      INFO.

Cancellation:
    - A ``CancellationToken`` listener cancels the task driving the exchange,
      which closes the connection even while a read is pending. The call then
      raises ``StreamCancelledError`` carrying the text forwarded so far.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type

import httpx
from pydantic import BaseModel

from ..config import get_provider_config
from .cancellation import CancellationToken, CancelledError, StreamCancelledError
from .errors import (
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    ProviderHttpError,
    classify_exception,
    is_connection_refused,
)
from .http.client import create_async_client
from .logging import LogContext, get_logger, log_event, normalized_log_event
from .models import ChatModelRequest, ChatModelResponse, ModelInfo
from .registry import ProviderId, ProviderMeta, resolve
from .streaming.accumulator import DeltaSink, StreamAccumulator
from .streaming.decoders import StreamDecoder
from .timeouts import get_timeout_config, operation_timeout

_BODY_EXCERPT_CHARS = 500


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return ``candidate`` stripped, or ``fallback`` when it is missing or blank."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


class HttpChatProvider:
    """Base class for provider families speaking JSON over HTTP.

    Subclasses set the class attributes and implement ``payload_for`` and
    ``parse_models``; everything else is shared.
    """

    provider_id: ClassVar[ProviderId]
    default_base_url: ClassVar[str]
    chat_path: ClassVar[str]
    models_path: ClassVar[str]
    response_model: ClassVar[Type[BaseModel]]
    decoder_cls: ClassVar[Type[StreamDecoder]]

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        config_overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Resolve configuration for this family.

        Parameters
        ----------
        base_url:
            Explicit API root. When omitted the layered configuration
            (defaults, config file, ``<PROVIDER>_BASE_URL``) decides.
        transport:
            Optional ``httpx`` transport; tests pass ``httpx.MockTransport``.
        config_overrides:
            Extra in-code overrides merged last into the provider config.
        """
        overrides = dict(config_overrides or {})
        overrides["base_url"] = base_url
        self._config = get_provider_config(self.provider_id.value, overrides=overrides)
        self._base_url = _coerce_non_empty_str(self._config.get("base_url"), self.default_base_url)
        self._transport = transport
        self._meta: ProviderMeta = resolve(self.provider_id)
        self._logger = get_logger(self.provider_id.value)

    @property
    def provider_name(self) -> str:
        return self.provider_id.value

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def meta(self) -> ProviderMeta:
        return self._meta

    # ------------------------------------------------------------------ wire
    def payload_for(self, request: ChatModelRequest) -> Dict[str, Any]:
        """Return the provider JSON body for ``request`` (no credential check)."""
        return {
            "model": request.model,
            "messages": [m.to_dict() for m in request.messages],
            "stream": bool(request.stream),
        }

    def build_payload(self, request: ChatModelRequest) -> Dict[str, Any]:
        """Validate the credential, then map ``request`` to the wire payload.

        Raises:
            MissingCredentialError: hosted family and no usable ``api_key``.
        """
        self.require_credential(request)
        return self.payload_for(request)

    def build_headers(self, api_key: Optional[str]) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def parse_response(self, body: Any) -> str:
        """Extract completion text from a non-streaming response document.

        A document that is not a JSON object (``null``, a list, a bare value)
        carries no text.
        """
        if not isinstance(body, dict):
            return ""
        return self.response_model.model_validate(body).text()

    def parse_models(self, body: Any) -> List[ModelInfo]:  # pragma: no cover - abstract
        raise NotImplementedError

    def require_credential(self, request: ChatModelRequest) -> Optional[str]:
        """Return the stripped credential, raising when a hosted family lacks one."""
        if not self._meta.requires_credential:
            return None
        key = (request.api_key or "").strip()
        if not key:
            raise MissingCredentialError(
                self.provider_name, self._meta.credential_key, model=request.model
            )
        return key

    def new_decoder(self, request: ChatModelRequest) -> StreamDecoder:
        return self.decoder_cls(
            provider=self.provider_name,
            model=request.model,
            request_id=request.request_id,
            logger=self._logger,
        )

    # ------------------------------------------------------------------ chat
    async def send(
        self,
        request: ChatModelRequest,
        on_delta: Optional[DeltaSink] = None,
        *,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatModelResponse:
        """Execute one chat call and return its single aggregated response.

        When ``request.stream`` is set, every non-empty delta is passed to
        ``on_delta`` as it is decoded; the returned ``content`` is exactly
        their concatenation.

        Raises:
            MissingCredentialError: before any network activity.
            ProviderHttpError: non-2xx status.
            NoStreamingBodyError: streaming response without a body.
            StreamCancelledError: ``cancellation`` fired.
            ProviderError: transport failure (classified code).
        """
        api_key = self.require_credential(request)
        payload = self.payload_for(request)
        headers = self.build_headers(api_key)
        ctx = LogContext.for_request(self.provider_name, request)
        acc = StreamAccumulator(on_delta)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", stream=bool(request.stream))
        try:
            content, raw = await self._run_cancellable(
                self._exchange(request, payload, headers, acc, cancellation, ctx),
                request,
                acc,
                cancellation,
            )
        except StreamCancelledError as exc:
            normalized_log_event(
                self._logger,
                "stream.cancelled",
                ctx,
                phase="cancelled",
                error_code=ErrorCode.CANCELLED.value,
                emitted=acc.emitted,
                reason=str(exc),
            )
            raise
        except ProviderError as exc:
            self._log_chat_error(ctx, exc.code, exc, acc)
            raise
        except (httpx.HTTPError, OSError) as exc:
            code = classify_exception(exc)
            self._log_chat_error(ctx, code, exc, acc)
            raise ProviderError(
                code=code,
                message=str(exc) or type(exc).__name__,
                provider=self.provider_name,
                model=request.model,
            ) from exc
        normalized_log_event(self._logger, "chat.end", ctx, phase="finalize", emitted=acc.emitted, chars=len(content))
        return ChatModelResponse(content=content, raw=raw, request_id=request.request_id)

    async def _exchange(
        self,
        request: ChatModelRequest,
        payload: Dict[str, Any],
        headers: Dict[str, str],
        acc: StreamAccumulator,
        cancellation: Optional[CancellationToken],
        ctx: LogContext,
    ) -> Tuple[str, Any]:
        async with create_async_client(self.base_url, headers=headers, transport=self._transport) as client:
            if not request.stream:
                resp = await client.post(self.chat_path, json=payload)
                await self._raise_for_status(resp, request)
                return self._parse_document(resp, request)

            async with client.stream("POST", self.chat_path, json=payload) as resp:
                await self._raise_for_status(resp, request)
                normalized_log_event(self._logger, "stream.start", ctx, phase="start", status=resp.status_code)
                result = await self.new_decoder(request).decode(
                    resp.aiter_bytes(), cancellation=cancellation, accumulator=acc
                )
                normalized_log_event(
                    self._logger,
                    "stream.end",
                    ctx,
                    phase="finalize",
                    emitted=acc.emitted,
                    frames=len(result.raw_frames),
                    done_marker=result.ended_by_marker,
                )
                return result.full_text, result.raw_frames

    async def _run_cancellable(
        self,
        coro: Any,
        request: ChatModelRequest,
        acc: StreamAccumulator,
        cancellation: Optional[CancellationToken],
    ) -> Tuple[str, Any]:
        """Await ``coro`` so that cancelling ``cancellation`` aborts it promptly.

        The token listener may run on any thread; it schedules ``task.cancel``
        on the loop. That scheduled cancel is only honoured while the exchange
        is still running.
        """
        if cancellation is None:
            return await coro
        if cancellation.cancelled:
            coro.close()
            raise self._cancelled(cancellation, request, acc)

        loop = asyncio.get_running_loop()
        task = asyncio.current_task()
        state = {"done": False, "fired": False}
        handles: List[asyncio.Handle] = []

        def _cancel_task() -> None:
            if not state["done"] and task is not None:
                state["fired"] = True
                task.cancel()

        def _on_cancel(_reason: Optional[str]) -> None:
            handles.append(loop.call_soon_threadsafe(_cancel_task))

        unregister = cancellation.register(_on_cancel)
        try:
            return await coro
        except asyncio.CancelledError as exc:
            if not state["fired"] or task is None:
                raise
            task.uncancel()
            raise self._cancelled(cancellation, request, acc) from exc
        except CancelledError as exc:
            raise self._cancelled(cancellation, request, acc) from exc
        finally:
            state["done"] = True
            unregister()
            for handle in handles:
                handle.cancel()

    @staticmethod
    def _cancelled(
        cancellation: CancellationToken, request: ChatModelRequest, acc: StreamAccumulator
    ) -> StreamCancelledError:
        return StreamCancelledError(
            cancellation.reason or "operation cancelled",
            partial_text=acc.full_text,
            raw_frames=acc.raw_frames,
            request_id=request.request_id,
        )

    async def _raise_for_status(self, resp: httpx.Response, request: ChatModelRequest) -> None:
        if resp.is_success:
            return
        body: Optional[str]
        try:
            await resp.aread()
            body = resp.text[:_BODY_EXCERPT_CHARS]
        except httpx.HTTPError:
            body = None
        raise ProviderHttpError(self.provider_name, resp.status_code, model=request.model, body=body)

    def _parse_document(self, resp: httpx.Response, request: ChatModelRequest) -> Tuple[str, Any]:
        try:
            body = resp.json()
        except ValueError as exc:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="response body is not valid JSON",
                provider=self.provider_name,
                model=request.model,
            ) from exc
        return self.parse_response(body), body

    def _log_chat_error(self, ctx: LogContext, code: ErrorCode, exc: BaseException, acc: StreamAccumulator) -> None:
        normalized_log_event(
            self._logger,
            "chat.error",
            ctx,
            phase="error",
            error_code=code.value,
            emitted=acc.emitted,
            level=logging.WARNING,
            error=str(exc),
        )

    # ---------------------------------------------------------------- models
    async def list_models(self, credential: Optional[str] = None) -> List[ModelInfo]:
        """List the models this provider serves, or ``[]`` when it cannot.

        Runs under the discovery deadline. Hosted families without a
        credential return ``[]`` without a network call.
        """
        ctx = LogContext(provider=self.provider_name)
        key = (credential or "").strip() or None
        if self._meta.requires_credential and key is None:
            log_event(self._logger, "models.list_skipped", ctx, level=logging.DEBUG, reason="no-credential")
            return []
        deadline = get_timeout_config().discovery_timeout_seconds
        try:
            async with operation_timeout(deadline):
                async with create_async_client(
                    self.base_url, headers=self.build_headers(key), transport=self._transport
                ) as client:
                    resp = await client.get(self.models_path)
            if not resp.is_success:
                log_event(self._logger, "models.list_failed", ctx, status=resp.status_code)
                return []
            models = self.parse_models(resp.json())
        except (httpx.HTTPError, OSError, TimeoutError, ValueError) as exc:
            reason = "connection refused" if is_connection_refused(exc) else str(exc) or type(exc).__name__
            log_event(
                self._logger,
                "models.list_failed",
                ctx,
                error_code=classify_exception(exc).value,
                reason=reason,
            )
            return []
        log_event(self._logger, "models.list", ctx, count=len(models))
        return models

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"{type(self).__name__}(base_url={self._base_url!r})"


__all__ = ["HttpChatProvider"]
