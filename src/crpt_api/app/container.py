from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..config.urls import get_create_document_url
from ..core.usecases.submit_document import SubmitDocumentUseCase
from ..infra.document_serializer import DocumentSerializer
from ..infra.http_client import HttpClient
from ..infra.rate_limiter import FixedWindowRateLimiter

logger = logging.getLogger(__name__)


def rate_limiter_resource(period_unit, period_count, request_limit):
	"""One limiter per container; every submission made through it shares the pool."""
	logger.info(f"Initializing rate limiter: {request_limit} requests per {period_count} {period_unit}")
	limiter = FixedWindowRateLimiter(period_unit, period_count, request_limit, name="crpt-api-limiter")
	try:
		yield limiter
	finally:
		logger.debug("Closing rate limiter")
		limiter.close()


def http_client_resource(timeout_seconds, transport_retries):
	logger.info("Initializing HTTP client")
	client = HttpClient(timeout_seconds=timeout_seconds, retries=transport_retries)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	rate_limiter = providers.Resource(
		rate_limiter_resource,
		period_unit=config.period_unit,
		period_count=config.period_count,
		request_limit=config.request_limit,
	)

	http_client = providers.Resource(
		http_client_resource,
		timeout_seconds=config.timeout_seconds,
		transport_retries=config.transport_retries,
	)

	serializer = providers.Singleton(DocumentSerializer)

	create_document_url = providers.Callable(get_create_document_url, config.base_url)

	submit_uc = providers.Factory(
		SubmitDocumentUseCase,
		rate_limiter=rate_limiter,
		transport=http_client,
		serializer=serializer,
		url=create_document_url,
	)
