"""
Mobile entry point (React Native / Expo style hosts).

Same surface as ``omnilog.browser``; the file sink is never imported.
"""

from .browser import *  # noqa: F401,F403
from .browser import __all__
