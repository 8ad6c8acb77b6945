# -*- coding: utf-8 -*-

from .beer import Beer, DecodeError, decode_beers
from .catalog import Catalog

__all__ = ['Beer', 'Catalog', 'DecodeError', 'decode_beers']
