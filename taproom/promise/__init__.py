# -*- coding: utf-8 -*-

from .deferred import Deferred
from .errors import AlreadySubscribedError, MisuseError
from .event_loop import EventLoop
from .join import join_all
from .thread_pool import ThreadPoolExecutor
from .util import is_deferred

__all__ = ['is_deferred', 'AlreadySubscribedError', 'Deferred', 'EventLoop',
           'MisuseError', 'ThreadPoolExecutor', 'join_all']
