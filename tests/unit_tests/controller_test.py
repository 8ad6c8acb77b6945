# -*- coding: utf-8 -*-

import io

import taproom
from taproom.controller import Controller
from taproom.models import Beer


class FakeCatalog(object):
    """Catalog calling back synchronously, with fixed content."""

    def __init__(self, beers=None, error=None):
        self.beers = []
        self.requested_pages = None
        self._beers = beers or []
        self._error = error

    def ready(self, callback):
        self.requested_pages = 1
        self._answer(callback)

    def ready_pages(self, pages, callback):
        self.requested_pages = pages
        self._answer(callback)

    def _answer(self, callback):
        if not self._error:
            self.beers = self._beers
        callback(self, self._error)


class TestController(object):

    def test_print_beers(self):
        output = io.StringIO()
        catalog = FakeCatalog([Beer(1, 'Buzz', 'A light IPA'),
                               Beer(2, 'Trashy Blonde', 'A blonde')])
        done = []

        Controller(catalog, output).start(on_done=lambda: done.append(1))

        assert output.getvalue() == ('Buzz A light IPA\n'
                                     'Trashy Blonde A blonde\n')
        assert catalog.requested_pages == 1
        assert done == [1]

    def test_print_error(self):
        output = io.StringIO()
        catalog = FakeCatalog(error='Call to remote API failed')
        done = []

        Controller(catalog, output).start(on_done=lambda: done.append(1))

        assert output.getvalue() == 'Call to remote API failed\n'
        assert done == [1]

    def test_several_pages(self):
        output = io.StringIO()
        catalog = FakeCatalog([Beer(1, 'Buzz', 'IPA')])

        Controller(catalog, output).start(pages=3)

        assert catalog.requested_pages == 3
        assert output.getvalue() == 'Buzz IPA\n'


class TestMain(object):

    def test_main(self, monkeypatch, tmpdir, capsys):
        catalog = FakeCatalog([Beer(1, 'Buzz', 'IPA')])

        monkeypatch.setattr('taproom.common.config._get_config_file_path',
                            lambda: str(tmpdir.join('taproom.ini')))
        monkeypatch.setattr('taproom.common.log._get_file_handler',
                            lambda filename: None)
        monkeypatch.setattr(taproom, 'Catalog', lambda: catalog)

        taproom.main()

        out, err = capsys.readouterr()
        assert 'Buzz IPA\n' in out
        assert taproom.network.fetch is None
