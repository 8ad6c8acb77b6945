# -*- coding: utf-8 -*-


def is_deferred(value):
    """Check if an object can be subscribed, like a Deferred.

    join_all() uses this function to refuse plain values mixed with the
    Deferreds it has to aggregate.

    Returns:
        boolean: True if the value has an attribute 'subscribe' who is
            callable. False if not.
    """
    return hasattr(getattr(value, 'subscribe', None), '__call__')
