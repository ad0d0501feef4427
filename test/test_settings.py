# -*- coding: utf-8 -*-

import json
import os
from unittest import mock

from pagezoom import constants
from pagezoom import preferences
from pagezoom import settings
from pagezoom.constants import ZoomMode
from pagezoom.controller import ZoomController
from pagezoom.preferences import prefs
from pagezoom.settings import DocumentSettings

from . import PageZoomTest
from .fakes import FakeDocument, FakeView, accept_all

class ResolveTest(PageZoomTest):

    def test_builtin_defaults(self):
        resolved = settings.resolve(DocumentSettings(), {})
        self.assertEqual(resolved.zoom_mode, constants.DEFAULT_ZOOM_MODE.value)
        self.assertEqual(resolved.zoom_factor, 2)
        self.assertEqual(resolved.overlap_h, 40)
        self.assertFalse(resolved.vertical_pan)
        self.assertIs(resolved.default_mode, constants.DEFAULT_ZOOM_MODE)

    def test_global_overrides_builtin(self):
        prefs['zoom_factor'] = 4
        prefs['zoom_mode'] = 'page'
        resolved = settings.resolve()
        self.assertEqual(resolved.zoom_factor, 4)
        self.assertEqual(resolved.zoom_mode, 'page')
        self.assertIs(resolved.default_mode, ZoomMode.PAGE)

    def test_document_overrides_global(self):
        prefs['zoom_factor'] = 4
        prefs['right_to_left'] = True
        doc = DocumentSettings(data={'zoom_factor': 3, 'right_to_left': False,
                                     'zoom_mode': 'column'})
        resolved = settings.resolve(doc)
        self.assertEqual(resolved.zoom_factor, 3)
        self.assertFalse(resolved.right_to_left)
        self.assertEqual(resolved.zoom_mode, 'column')
        # the default mode only comes from the global preferences
        self.assertIs(resolved.default_mode, constants.DEFAULT_ZOOM_MODE)

    def test_view_settings_come_from_preferences(self):
        prefs['footer_height'] = 32
        prefs['page_scroll'] = True
        resolved = settings.resolve()
        self.assertEqual(resolved.footer_height, 32)
        self.assertTrue(resolved.page_scroll)
        self.assertEqual(resolved.margin_pixels(),
                         prefs['page_margin'] * prefs['screen_dpi'])

    def test_resolve_mode(self):
        self.assertIs(settings.resolve_mode('pan', ZoomMode.PAGE), ZoomMode.PAN)
        self.assertIs(settings.resolve_mode(ZoomMode.PAN, ZoomMode.PAGE),
                      ZoomMode.PAN)
        self.assertIs(settings.resolve_mode('colu', ZoomMode.PAGE),
                      ZoomMode.PAGE)
        self.assertIs(settings.resolve_mode(None, ZoomMode.PAGE),
                      ZoomMode.PAGE)

class DocumentSettingsTest(PageZoomTest):

    def test_flush_and_reload(self):
        path = os.path.join(self.tmp_dir, 'book.json')
        doc = DocumentSettings(path)
        doc.save_setting('zoom_mode', 'pan')
        doc.save_setting('overlap_v', 10)
        doc.flush()
        reloaded = DocumentSettings(path)
        self.assertEqual(reloaded.read_setting('zoom_mode'), 'pan')
        self.assertEqual(reloaded.read_setting('overlap_v'), 10)
        self.assertIsNone(reloaded.read_setting('overlap_h'))

    def test_corrupt_file_is_ignored(self):
        path = os.path.join(self.tmp_dir, 'book.json')
        with open(path, 'w') as f:
            f.write('{not json')
        self.assertIsNone(DocumentSettings(path).read_setting('zoom_mode'))

    def test_in_memory_flush_is_noop(self):
        doc = DocumentSettings()
        doc.save_setting('zoom_mode', 'page')
        doc.flush()
        doc.del_setting('zoom_mode')
        self.assertIsNone(doc.read_setting('zoom_mode'))

    def test_controller_round_trip(self):
        controller = ZoomController(FakeDocument(), FakeView(), (600, 800),
                                    will_accept=accept_all)
        controller.read_settings(settings.ZoomSettings(zoom_mode='content',
                                                       zoom_factor=3))
        controller.set_pan_overlap('overlap_v', 15)
        controller.toggle_pan_flag('bottom_to_top')
        controller.enter_flipping_mode('page')
        doc = DocumentSettings()
        controller.save_settings(doc)
        self.assertEqual(doc.read_setting('zoom_mode'), 'content')
        resolved = settings.resolve(doc)
        self.assertEqual(resolved.zoom_factor, 3)
        self.assertEqual(resolved.overlap_v, 15)
        self.assertTrue(resolved.bottom_to_top)

class PreferencesFileTest(PageZoomTest):

    def setUp(self):
        super(PreferencesFileTest, self).setUp()
        self.path = os.path.join(self.tmp_dir, 'config', 'preferences.conf')
        patcher = mock.patch.object(constants, 'PREFERENCE_PATH', self.path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_write_and_read(self):
        prefs['zoom_mode'] = 'column'
        preferences.write_preferences_file()
        prefs['zoom_mode'] = 'page'
        preferences.read_preferences_file()
        self.assertEqual(prefs['zoom_mode'], 'column')

    def test_unknown_keys_are_dropped(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, 'w') as f:
            json.dump({'zoom_factor': 5, 'no such key': 1}, f)
        preferences.read_preferences_file()
        self.assertEqual(prefs['zoom_factor'], 5)
        self.assertNotIn('no such key', prefs)

    def test_corrupt_file_is_moved(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, 'w') as f:
            f.write('{not json')
        preferences.read_preferences_file()
        self.assertFalse(os.path.exists(self.path))
        self.assertTrue(os.path.exists(self.path + '.broken'))
        self.assertEqual(prefs['zoom_mode'], constants.DEFAULT_ZOOM_MODE.value)

# vim: expandtab:sw=4:ts=4
