"""
Settings package.

``DJANGO_ENV`` picks the flavour: ``prod``, ``test`` or anything else for
development. Setting ``DJANGO_SETTINGS_MODULE`` to one of the submodules
directly bypasses the switch.
"""

import os

_env = os.environ.get('DJANGO_ENV', 'dev')

if _env == 'prod':
    from .prod import *
elif _env == 'test':
    from .test import *
else:
    from .dev import *
