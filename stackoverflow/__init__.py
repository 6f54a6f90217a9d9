#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Client for the Stack Exchange API (https://api.stackexchange.com/)."""

from .client import (
    API_VERSION, ROOT, STACK_OVERFLOW,
    SORT_ACTIVITY, SORT_CREATION, SORT_HOT, SORT_WEEK, SORT_MONTH, SORT_SCORE,
    ORDER_ASC, ORDER_DESC,
    PATH_ANSWERS, PATH_ANSWERS_BY_IDS, PATH_ANSWER_COMMENTS, PATH_COMMENTS,
    PATH_ALL_QUESTIONS, PATH_QUESTIONS, PATH_QUESTION_ANSWERS,
    PATH_QUESTION_COMMENTS, PATH_TAG_TOP_ASKERS, PATH_TAG_TOP_ANSWERERS,
    PATH_USERS, PATH_USERS_BY_IDS,
    Client, Items, Params, Wrapper, do, encode_params, parse_response,
)
from .errors import APIError, DecodeError, StackExchangeError, TransportError
from .models import (
    Answer, BadgeCount, Comment, FormatError, Question, Time, User,
    decode_time, encode_time,
)
from .utils import fill_placeholders, join_ids
