"""HTTP route definitions for the service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from services.catalog import MetricCatalog, build_default_catalog
from services.collector import render_scrape
from services.device_client import (
    DeviceClient,
    InvalidHostError,
    build_default_device_client,
    validate_host,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_device_client() -> DeviceClient:
    return build_default_device_client()


def get_catalog() -> MetricCatalog:
    return build_default_catalog()


@router.get(
    "/metrics",
    summary="Exporter process metrics.",
    response_class=Response,
)
async def process_metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/awair",
    summary="Scrape one device and expose its latest reading.",
    response_class=Response,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Missing or malformed host parameter."},
    },
)
def scrape_device(
    request: Request,
    client: DeviceClient = Depends(get_device_client),
    catalog: MetricCatalog = Depends(get_catalog),
) -> Response:
    # First value wins when the parameter is repeated.
    hosts = request.query_params.getlist("host")
    try:
        host = validate_host(hosts[0] if hosts else None)
    except InvalidHostError as exc:
        logger.debug(
            "Rejected scrape request",
            extra={"host": hosts[0] if hosts else None, "reason": str(exc)},
        )
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    body, _sample = render_scrape(client=client, catalog=catalog, host=host)
    return Response(content=body, media_type=CONTENT_TYPE_LATEST)
