# -*- coding: utf-8 -*-

import os
import sys

# Useful to be able to run the current testsuite with another PageZoom version.
pagezoom_path = os.environ.get('PAGEZOOMPATH', None)
if pagezoom_path is not None:
    sys.path.insert(0, pagezoom_path)

# Enable debug logging to make post-mortem analysis easier.

from pagezoom import log

log.setLevel('DEBUG')

# Use a custom testcase class:
# - isolate tests: do not use or modify the user current
#   configuration for PageZoom (preferences, document settings...)
# - make sure PageZoom state is reset before each test

import shutil
import tempfile
import unittest

from pagezoom.preferences import prefs

default_prefs = {}
default_prefs.update(prefs)

class PageZoomTest(unittest.TestCase):

    def setUp(self):
        name = '.'.join((
            self.__module__.split('.')[-1],
            self.__class__.__name__,
            self._testMethodName))
        self.tmp_dir = tempfile.mkdtemp(prefix='%s.' % name)
        self.addCleanup(shutil.rmtree, self.tmp_dir, True)
        # Change storage directories.
        self._saved_environ = dict(os.environ)
        self.addCleanup(self._restore_environ)
        home_dir = os.path.join(self.tmp_dir, 'home')
        os.mkdir(home_dir)
        os.environ['HOME'] = home_dir
        os.environ['XDG_CONFIG_HOME'] = os.path.join(home_dir, 'config')
        # Reset preferences to default.
        prefs.clear()
        prefs.update(default_prefs)

    def _restore_environ(self):
        os.environ.clear()
        os.environ.update(self._saved_environ)

