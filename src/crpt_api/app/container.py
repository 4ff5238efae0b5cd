from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..core.usecases.create_document import CreateDocumentUseCase
from ..infra.document_adapter import DocumentAdapter
from ..infra.http_client import HttpClient
from ..infra.rate_limiter import Throttle

logger = logging.getLogger(__name__)


def throttle_factory(window_seconds, request_limit):
	logger.info(f"Rate limit: {request_limit} request(s) per {window_seconds}s")
	return Throttle(window=window_seconds, limit=request_limit)


def http_client_resource(token, timeout_seconds, rate_limiter):
	"""Create the HTTP client as a resource with proper cleanup.

	Every request made through it waits on the shared throttle first.
	"""
	headers = {"Content-Type": "application/json"}
	if token:
		token_preview = f"{token[:8]}..." if len(token) > 8 else "***"
		logger.info(f"API token found: {token_preview} (length: {len(token)})")
		headers["Authorization"] = f"Bearer {token}"
	else:
		logger.warning("No API token configured - requests will be sent without Authorization")

	client = HttpClient(base_headers=headers, timeout_seconds=timeout_seconds, rate_limiter=rate_limiter)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	# One budget per container, shared by every caller of this client
	throttle = providers.Singleton(
		throttle_factory,
		window_seconds=config.window_seconds,
		request_limit=config.request_limit,
	)

	http_client = providers.Resource(
		http_client_resource,
		token=config.token,
		timeout_seconds=config.timeout_seconds,
		rate_limiter=throttle,
	)

	document_registry = providers.Singleton(
		DocumentAdapter,
		http_client=http_client,
		base_url=config.base_url,
		product_group=config.product_group,
	)

	create_document_uc = providers.Factory(CreateDocumentUseCase, registry=document_registry)
