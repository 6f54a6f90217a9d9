#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Stack Exchange API types.

Only the fields a consumer usually needs are declared; anything else the
API sends back is ignored. Field names follow the wire names.

See: https://api.stackexchange.com/docs/types
"""

import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator

EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_SECOND = datetime.timedelta(seconds=1)


class FormatError(ValueError):
    """A wire time value is not an integer count of seconds."""


def encode_time(t):
    """Convert a datetime to integer seconds since the Unix epoch.

    Naive datetimes are taken to be UTC.
    """

    if t.tzinfo is None:
        t = t.replace(tzinfo=datetime.timezone.utc)
    return (t - EPOCH) // _SECOND

def decode_time(value):
    """Convert integer seconds since the Unix epoch to an aware UTC datetime.

    Negative values are dates before 1970.
    """

    # bool is an int subclass, but true/false are not timestamps
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError("time must be integer epoch seconds, got {!r}"
                          .format(value))
    try:
        return EPOCH + value * _SECOND
    except OverflowError as exc:
        raise FormatError("epoch seconds {} out of datetime range"
                          .format(value)) from exc

def _validate_time(value):
    if isinstance(value, datetime.datetime):
        return value
    return decode_time(value)

# https://api.stackexchange.com/docs/dates
Time = Annotated[datetime.datetime, PlainValidator(_validate_time),
                 PlainSerializer(encode_time, return_type=int)]


class BadgeCount(BaseModel):
    """Number of badges a user has earned, by class."""

    bronze: int = 0
    silver: int = 0
    gold: int = 0

    def total(self):
        return self.bronze + self.silver + self.gold


class User(BaseModel):
    """A user of one of the Stack Exchange sites.

    The shallow user embedded in posts (owner, reply_to_user) only carries
    a few of these fields.
    """

    user_id: int = 0
    account_id: int = 0
    display_name: str = ""
    user_type: str = ""
    link: str = ""
    profile_image: str = ""
    about_me: str = ""
    location: str = ""
    website_url: str = ""
    accept_rate: int = 0
    age: int = 0
    is_employee: bool = False
    badge_counts: BadgeCount = Field(default_factory=BadgeCount)
    creation_date: Optional[Time] = None
    last_access_date: Optional[Time] = None
    last_modified_date: Optional[Time] = None
    timed_penalty_date: Optional[Time] = None
    answer_count: int = 0
    question_count: int = 0
    up_vote_count: int = 0
    down_vote_count: int = 0
    view_count: int = 0
    reputation: int = 0
    reputation_change_day: int = 0
    reputation_change_week: int = 0
    reputation_change_month: int = 0
    reputation_change_quarter: int = 0
    reputation_change_year: int = 0


class Comment(BaseModel):
    """A remark on a question or answer."""

    comment_id: int = 0
    post_id: int = 0
    post_type: str = ""
    body: str = ""
    link: str = ""
    creation_date: Optional[Time] = None
    edited: bool = False
    score: int = 0
    owner: Optional[User] = None
    reply_to_user: Optional[User] = None


class Answer(BaseModel):
    """An answer to a question."""

    answer_id: int = 0
    question_id: int = 0
    title: str = ""
    body: str = ""
    link: str = ""
    tags: List[str] = Field(default_factory=list)
    is_accepted: bool = False
    score: int = 0
    up_vote_count: int = 0
    down_vote_count: int = 0
    view_count: int = 0
    owner: Optional[User] = None
    comments: List[Comment] = Field(default_factory=list)
    creation_date: Optional[Time] = None
    last_activity_date: Optional[Time] = None
    last_edit_date: Optional[Time] = None
    locked_date: Optional[Time] = None
    community_owned_date: Optional[Time] = None


class Question(BaseModel):
    """A question, optionally with its answers and comments."""

    question_id: int = 0
    title: str = ""
    body: str = ""
    link: str = ""
    tags: List[str] = Field(default_factory=list)
    is_answered: bool = False
    accepted_answer_id: int = 0
    answer_count: int = 0
    answers: List[Answer] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)
    score: int = 0
    up_vote_count: int = 0
    down_vote_count: int = 0
    favorite_count: int = 0
    view_count: int = 0
    close_vote_count: int = 0
    reopen_vote_count: int = 0
    delete_vote_count: int = 0
    bounty_amount: int = 0
    closed_reason: str = ""
    owner: Optional[User] = None
    creation_date: Optional[Time] = None
    last_activity_date: Optional[Time] = None
    last_edit_date: Optional[Time] = None
    closed_date: Optional[Time] = None
    locked_date: Optional[Time] = None
    protected_date: Optional[Time] = None
    community_owned_date: Optional[Time] = None
    bounty_closes_date: Optional[Time] = None
