# -*- coding: utf-8 -*-
"""Focus-session timer: CSV session log, daily summary and streak."""

__version__ = "0.1.0"
