#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Entry Point for the executable.

Runs the taproom client without installing it.
"""

import sys

import taproom

if __name__ == "__main__":
    sys.exit(taproom.main())
