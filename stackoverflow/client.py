#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Access to the Stack Exchange API.

A request names a path template, the options for the query string and a
destination for the decoded items:

    questions = Items(Question)
    wrapper = do(PATH_QUESTIONS, questions,
                 Params(site=STACK_OVERFLOW, args=["11227809"]))
    print(questions[0].title)

See: https://api.stackexchange.com/docs
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlencode

import requests
import structlog
from pydantic import TypeAdapter

from .errors import APIError, DecodeError, TransportError
from .utils import fill_placeholders

logger = structlog.get_logger(__name__)

API_VERSION = "2.2"
ROOT = "https://api.stackexchange.com/" + API_VERSION

STACK_OVERFLOW = "stackoverflow"

SORT_ACTIVITY = "activity"
SORT_CREATION = "creation"
SORT_HOT = "hot"
SORT_WEEK = "week"
SORT_MONTH = "month"
SORT_SCORE = "votes"

ORDER_ASC = "asc"
ORDER_DESC = "desc"

PATH_ANSWERS = "/answers"
PATH_ANSWERS_BY_IDS = "/answers/{ids}"
PATH_ANSWER_COMMENTS = "/answers/{ids}/comments"
PATH_COMMENTS = "/comments"
PATH_ALL_QUESTIONS = "/questions"
PATH_QUESTIONS = "/questions/{ids}"
PATH_QUESTION_ANSWERS = "/questions/{ids}/answers"
PATH_QUESTION_COMMENTS = "/questions/{ids}/comments"
PATH_TAG_TOP_ASKERS = "/tags/{tag}/top-askers/{period}"
PATH_TAG_TOP_ANSWERERS = "/tags/{tag}/top-answerers/{period}"
PATH_USERS = "/users"
PATH_USERS_BY_IDS = "/users/{ids}"


@dataclass
class Params:
    """Common arguments of an API request.

    Numbers left at 0 and empty strings are not sent, except for the site.
    ``args`` fill the placeholders of the path, in order.
    """

    site: str = ""
    sort: str = ""
    order: str = ""
    page: int = 0
    pagesize: int = 0
    filter: str = ""
    args: List[str] = field(default_factory=list)
    access_token: str = ""
    key: str = ""

    def values(self):
        vals = {'site': self.site}
        for name in ('sort', 'order'):
            if getattr(self, name):
                vals[name] = getattr(self, name)
        for name in ('page', 'pagesize'):
            if getattr(self, name):
                vals[name] = str(getattr(self, name))
        for name in ('filter', 'access_token', 'key'):
            if getattr(self, name):
                vals[name] = getattr(self, name)
        return vals

def encode_params(params):
    return urlencode(params.values())


class Items(list):
    """Destination that decodes the ``items`` array of a response.

    Each element is validated into ``model``; without a model the elements
    are kept as plain JSON values. Any other object with a ``load_json``
    method can be used as a destination as well.
    """

    def __init__(self, model=None, iterable=()):
        super().__init__(iterable)
        self.model = model
        self._adapter = None
        if model is not None:
            self._adapter = TypeAdapter(List[model])

    def load_json(self, value):
        if value is None:
            self.clear()
        elif self._adapter is not None:
            self[:] = self._adapter.validate_python(value)
        elif isinstance(value, list):
            self[:] = value
        else:
            raise ValueError("items must be a JSON array, got {}"
                             .format(type(value).__name__))


@dataclass
class Wrapper:
    """The common fields of a response, everything but the items.

    ``error`` is set only when the API reported one. It is data, the
    request itself succeeded; see raise_for_error.

    See: https://api.stackexchange.com/docs/wrapper
    """

    error: Optional[APIError] = None
    page: int = 0
    page_size: int = 0
    has_more: bool = False
    backoff: int = 0
    quota_max: int = 0
    quota_remaining: int = 0
    total: int = 0
    type: str = ""

    def raise_for_error(self):
        if self.error is not None:
            raise self.error

_WRAPPER_FIELDS = [
    ('page', int),
    ('page_size', int),
    ('has_more', bool),
    ('backoff', int),
    ('quota_max', int),
    ('quota_remaining', int),
    ('total', int),
    ('type', str),
]
_ERROR_FIELDS = [
    ('error_id', int),
    ('error_name', str),
    ('error_message', str),
]

def _typed(data, key, kind, bad_fields):
    value = data.get(key)
    if value is None:
        return None
    # JSON true/false must not pass for numbers
    if kind is int and isinstance(value, bool) or not isinstance(value, kind):
        bad_fields.append(key)
        return None
    return value

def parse_response(body, items):
    """Decode a response body into a Wrapper and the items destination.

    Raises DecodeError if the body is not a JSON object, if a wrapper field
    has the wrong type or if the destination rejects the items. The error
    carries the wrapper with every field that could be decoded.
    """

    wrapper = Wrapper()
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise DecodeError("response is not valid JSON: {}".format(exc),
                          wrapper) from exc
    if not isinstance(data, dict):
        raise DecodeError("response wrapper is not a JSON object", wrapper)

    bad_fields = list()
    for key, kind in _WRAPPER_FIELDS:
        value = _typed(data, key, kind, bad_fields)
        if value is not None:
            setattr(wrapper, key, value)

    error_id, error_name, error_message = \
        (_typed(data, key, kind, bad_fields) for key, kind in _ERROR_FIELDS)
    if error_id or error_name or error_message:
        wrapper.error = APIError(error_id or 0, error_name or "",
                                 error_message or "")

    if items is not None and 'items' in data:
        try:
            items.load_json(data['items'])
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise DecodeError("cannot decode items: {}".format(exc),
                              wrapper) from exc

    if bad_fields:
        raise DecodeError("wrong type for wrapper fields: {}"
                          .format(", ".join(bad_fields)), wrapper)
    return wrapper


class Client:
    """Makes API requests.

    Without a session the module-level functions of requests are used.
    Pass access_token and key if you have an application registered on
    stackapps.com; they, and the default filter, are sent unless the
    request's Params set their own.
    """

    def __init__(self, session=None, root=ROOT, access_token="", key="",
                 filter=""):
        self.session = session
        self.root = root or ROOT
        self.access_token = access_token
        self.key = key
        self.filter = filter

    def url(self, path, params):
        vals = params.values()
        if self.filter:
            vals.setdefault('filter', self.filter)
        if self.access_token:
            vals.setdefault('access_token', self.access_token)
        if self.key:
            vals.setdefault('key', self.key)
        path = fill_placeholders(path, params.args)
        return self.root + path + "?" + urlencode(vals)

    def do(self, path, items, params=None):
        """Perform a GET request and decode the response into items.

        Returns the Wrapper. Raises TransportError if there is no response
        and DecodeError if the response cannot be decoded.
        """

        if params is None:
            params = Params()
        http = self.session if self.session is not None else requests

        logger.debug("stackexchange_request", path=path, site=params.site)
        try:
            response = http.get(self.url(path, params))
        except requests.RequestException as exc:
            logger.error("stackexchange_request_failed", path=path,
                         error=str(exc), error_type=type(exc).__name__)
            raise TransportError(str(exc)) from exc

        with response:
            try:
                wrapper = parse_response(response.content, items)
            except DecodeError as exc:
                logger.warning("stackexchange_decode_failed", path=path,
                               error=str(exc))
                raise

        if wrapper.error is not None:
            logger.info("stackexchange_api_error", path=path,
                        error_id=wrapper.error.id,
                        error_name=wrapper.error.name)
        if wrapper.backoff:
            logger.info("stackexchange_backoff", path=path,
                        backoff=wrapper.backoff)
        return wrapper

def do(path, items, params=None, client=None):
    """Perform an API request with client, or a default Client if None."""

    if client is None:
        client = Client()
    return client.do(path, items, params)
