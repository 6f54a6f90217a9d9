#!/usr/bin/env python3
# -*- coding: utf-8 -*-

def fill_placeholders(path, args):
    """Substitute positional arguments into the {placeholders} of a path.

    The i-th placeholder is replaced with args[i]. Placeholders without a
    matching argument are left as they are, extra arguments are ignored.
    A '{' that is never closed does not start a placeholder.

    >>> fill_placeholders("/tags/{tag}/top-askers/{period}", ["python", "all_time"])
    '/tags/python/top-askers/all_time'
    """

    if not path or not args:
        return path

    result = list()
    start, n = 0, 0
    while True:
        opening = path.find('{', start)
        if opening == -1:
            break
        closing = path.find('}', opening + 1)
        if closing == -1:
            break
        result.append(path[start:opening])
        if n < len(args):
            result.append(str(args[n]))
        else:
            result.append(path[opening:closing + 1])
        n += 1
        start = closing + 1

    result.append(path[start:])
    return "".join(result)

def join_ids(ids):
    """Build the semicolon-delimited vector the API expects for {ids}."""

    return ';'.join(map(str, ids))
