#!/usr/bin/env python3
# -*- coding: utf-8 -*-

""" PageZoom installation routines.

Example usage:
    Normal installation (all files are copied into a directory in python/lib/site-packages/pagezoom)
    $ ./setup.py install

    Development installation, with the test dependencies
    $ pip install -e .[test]
"""

import setuptools

from pagezoom import constants

setuptools.setup(
    name = constants.APPNAME.lower(),
    version = constants.VERSION,
    packages = ['pagezoom'],
    test_suite = "test",
    python_requires = '>=3.5',
    install_requires = ['Pillow>=%s' % constants.REQUIRED_PIL_VERSION],
    extras_require = {
        'test' : ['pytest'],
    },
    zip_safe = False,

    # Package metadata
    description = 'Zoom and viewport fitting for paginated document viewers',
    long_description = 'PageZoom computes the zoom level used to render a page '
        'of a paginated document, for fit-to-page, content box, column and '
        'free zoom modes, respecting rotation and a render cache budget.',
    license = "License :: OSI Approved :: GNU General Public License (GPL)",
    platforms = ['Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: BSD'],
)

# vim: expandtab:sw=4:ts=4
