#!/usr/bin/env python3
# -*- coding: utf-8 -*-

class StackExchangeError(Exception):
    """Base exception for Stack Exchange API client errors."""
    pass


class TransportError(StackExchangeError):
    """The request never produced a response (DNS, connection, timeout)."""
    pass


class DecodeError(StackExchangeError):
    """The response body does not fit the wrapper or the destination.

    Whatever wrapper fields could be read are kept on ``wrapper`` so that
    paging and quota information is still available to the caller.
    """

    def __init__(self, message, wrapper=None):
        super().__init__(message)
        self.wrapper = wrapper


class APIError(StackExchangeError):
    """An error reported by the API inside the response wrapper.

    See: https://api.stackexchange.com/docs/error-handling
    """

    def __init__(self, id=0, name="", message=""):
        super().__init__(id, name, message)
        self.id = id
        self.name = name
        self.message = message

    def __str__(self):
        return "{} ({} {})".format(self.message, self.id, self.name)
