# -*- coding: utf-8 -*-

__version__ = '0.2.0'
