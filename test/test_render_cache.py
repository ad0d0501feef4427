# -*- coding: utf-8 -*-

from pagezoom import render_cache
from pagezoom.controller import ZoomController
from pagezoom.preferences import prefs
from pagezoom.render_cache import RenderCache

from . import PageZoomTest
from .fakes import FakeDocument, FakeView

class RenderCacheTest(PageZoomTest):

    def test_bytes_per_pixel(self):
        self.assertEqual(render_cache.bytes_per_pixel('L'), 1)
        self.assertEqual(render_cache.bytes_per_pixel('RGB'), 3)
        self.assertEqual(render_cache.bytes_per_pixel('RGBA'), 4)
        self.assertEqual(render_cache.bytes_per_pixel('F'), 4)

    def test_single_bitmap_limit(self):
        cache = RenderCache(max_memsize=400, mode='L')
        self.assertTrue(cache.will_accept(299))
        self.assertFalse(cache.will_accept(300))
        rgb = RenderCache(max_memsize=400, mode='RGB')
        self.assertTrue(rgb.will_accept(99))
        self.assertFalse(rgb.will_accept(100))

    def test_defaults_from_preferences(self):
        prefs['render_cache_size'] = 1000
        prefs['render_cache_mode'] = 'RGBA'
        cache = RenderCache()
        self.assertEqual(cache.max_memsize, 1000)
        self.assertEqual(cache.mode, 'RGBA')

    def test_controller_default_budget(self):
        # 600x800 viewport: zoom z costs z * (480000 + 64) pixels and a
        # single bitmap may use 3/4 of the budget.
        prefs['render_cache_size'] = 21 * 480064
        prefs['render_cache_mode'] = 'L'
        view = FakeView()
        controller = ZoomController(FakeDocument(), view, (600, 800))
        controller.set_zoom_factor(10)
        controller.set_mode('pan')
        self.assertEqual(controller.zoom, 15)
        self.assertEqual(view.zooms[-1], 15)

# vim: expandtab:sw=4:ts=4
