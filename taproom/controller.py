# -*- coding: utf-8 -*-

import logging
import sys

_logger = logging.getLogger(__name__)


class Controller(object):
    """Loads the beer catalogue, then prints it.

    One line is printed by beer, in the form "<name> <description>". If the
    catalogue can't be loaded, the error message is printed instead.
    """

    def __init__(self, catalog, output=None):
        """
        Args:
            catalog (Catalog): model to display.
            output (File-like, optional): where to print. Default to
                ``sys.stdout``.
        """
        self.catalog = catalog
        self._output = output or sys.stdout

    def start(self, pages=1, on_done=None):
        """Request the beers, and print them as soon as they're available.

        Args:
            pages (int): number of pages to load. With one page, a single
                request is sent to the catalogue URL.
            on_done (callable, optional): called without argument after the
                catalogue (or the error) has been printed.
        """
        def display(catalog, error):
            try:
                if error:
                    _logger.info('Catalogue unavailable: %s', error)
                    self._print(error)
                else:
                    for beer in catalog.beers:
                        self._print('%s %s' % (beer.name, beer.description))
            finally:
                if on_done:
                    on_done()

        if pages > 1:
            self.catalog.ready_pages(pages, display)
        else:
            self.catalog.ready(display)

    def _print(self, text):
        self._output.write(text + '\n')
