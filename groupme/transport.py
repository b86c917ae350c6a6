"""
GET/POST helpers shared by the user and bot interfaces.

Both helpers send a single JSON request on the session they are given, reject
any status outside the accepted set, and validate the buffered body into the
caller's envelope model.
"""

import logging
from typing import Dict, Optional, Tuple, Type

import requests
from pydantic import BaseModel, ValidationError

from groupme.errors import RequestError, TransportError

logger = logging.getLogger(__name__)

HEADERS = {'Content-Type': 'application/json'}

OK_STATUSES = (200, 201)


def get(session: requests.Session, url: str, envelope: Type[BaseModel], params: Optional[Dict] = None) -> BaseModel:
    """Issue a GET and return the decoded envelope."""
    response = _send(session, 'GET', url, params=params)
    return _decode(response, url, envelope)


def post(session: requests.Session, url: str, envelope: Optional[Type[BaseModel]] = None,
         params: Optional[Dict] = None, payload: Optional[Dict] = None,
         ok_statuses: Tuple[int, ...] = OK_STATUSES):
    """
    Issue a POST with a JSON body.

    Returns the decoded envelope, or the raw response when no envelope is given.
    """
    response = _send(session, 'POST', url, params=params, payload=payload, ok_statuses=ok_statuses)
    if envelope is None:
        return response
    return _decode(response, url, envelope)


def _send(session: requests.Session, method: str, url: str, params: Optional[Dict] = None,
          payload: Optional[Dict] = None, ok_statuses: Tuple[int, ...] = OK_STATUSES) -> requests.Response:
    logger.debug("%s %s", method, url)
    try:
        response = session.request(method, url, params=params, headers=HEADERS, json=payload)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Error requesting {url}: {e}") from e

    if response.status_code not in ok_statuses:
        logger.debug("%s %s failed with status %d", method, url, response.status_code)
        raise RequestError(url, response.status_code)

    return response


def _decode(response: requests.Response, url: str, envelope: Type[BaseModel]) -> BaseModel:
    if not response.content:
        return envelope()

    try:
        data = response.json()
    except ValueError as e:
        raise TransportError(f"Invalid JSON from {url}: {e}") from e

    try:
        return envelope.model_validate(data)
    except ValidationError as e:
        raise TransportError(f"Unexpected response from {url}: {e}") from e
