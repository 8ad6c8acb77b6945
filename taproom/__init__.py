# -*- coding: utf-8 -*-

from .__version__ import __version__  # noqa

import logging
import os

from .common import log
from .common import config
from .controller import Controller
from .models import Catalog
from .promise import EventLoop
from . import network


def main():
    """Entry point of the taproom client."""

    # Start log and load config
    with log.Context():

        logger = logging.getLogger(__name__)
        logger.debug('Current working directory is : "%s"', os.getcwd())

        config.load()
        log.set_debug_mode(config.get('debug_mode'))
        log.set_logs_level(config.get('log_levels'))

        loop = EventLoop()
        with network.Context(loop):
            controller = Controller(Catalog())
            controller.start(config.get('pages'), on_done=loop.stop)
            loop.run()


if __name__ == "__main__":
    main()
