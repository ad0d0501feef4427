# -*- coding: utf-8 -*-
''' settings.py - Per-document zoom settings and their resolution against
the global preferences. '''

import os
import json

from pagezoom import constants
from pagezoom import log
from pagezoom.preferences import prefs


class DocumentSettings(object):
    ''' Settings stored for a single document. Values missing here fall
    back to the global preferences when resolved. '''

    def __init__(self, path=None, data=None):
        #: JSON file backing these settings, or None for in-memory only.
        self.path = path
        self._data = dict(data or {})
        if path is not None and data is None:
            self._load()

    def _load(self):
        if not os.path.isfile(self.path):
            return
        try:
            with open(self.path, 'r') as settings_file:
                self._data = json.load(settings_file)
        except (OSError, ValueError) as e:
            log.warning('! Could not read document settings "%s": %s',
                        self.path, e)
            self._data = {}

    def read_setting(self, key):
        return self._data.get(key)

    def save_setting(self, key, value):
        self._data[key] = value

    def del_setting(self, key):
        self._data.pop(key, None)

    def flush(self):
        ''' Writes the settings to disk, if they are backed by a file. '''
        if self.path is None:
            return
        with open(self.path, 'w') as settings_file:
            json.dump(self._data, settings_file, indent=2)


class ZoomSettings(object):
    ''' Resolved configuration handed to the controller. Every attribute
    holds its final value; no further lookups happen in the engine. '''

    def __init__(self, zoom_mode=constants.DEFAULT_ZOOM_MODE.value,
                 zoom_factor=2, overlap_h=40, overlap_v=40,
                 right_to_left=False, bottom_to_top=False,
                 vertical_pan=False, default_mode=None, page_margin=0.06,
                 screen_dpi=160, footer_height=0,
                 footer_reclaim_height=False, page_scroll=False):
        self.zoom_mode = zoom_mode
        self.zoom_factor = zoom_factor
        self.overlap_h = overlap_h
        self.overlap_v = overlap_v
        self.right_to_left = right_to_left
        self.bottom_to_top = bottom_to_top
        self.vertical_pan = vertical_pan
        #: Mode used for unknown or missing mode names.
        self.default_mode = resolve_mode(default_mode,
                                         constants.DEFAULT_ZOOM_MODE)
        self.page_margin = page_margin
        self.screen_dpi = screen_dpi
        self.footer_height = footer_height
        self.footer_reclaim_height = footer_reclaim_height
        self.page_scroll = page_scroll

    def margin_pixels(self):
        ''' Returns the configured page margin in screen pixels. '''
        return self.page_margin * self.screen_dpi


def resolve_mode(name, default):
    ''' Maps a mode name (or ZoomMode) to a ZoomMode. Unknown or missing
    names resolve to <default>. '''
    if isinstance(name, constants.ZoomMode):
        return name
    try:
        return constants.ZoomMode(name)
    except ValueError:
        if name is not None:
            log.debug('Unknown zoom mode %r, using %s', name, default.value)
        return default


def _lookup(key, doc_settings, global_prefs, builtin):
    if doc_settings is not None:
        value = doc_settings.read_setting(key)
        if value is not None:
            return value
    value = global_prefs.get(key)
    if value is not None:
        return value
    return builtin


def resolve(doc_settings=None, global_prefs=None):
    ''' Builds ZoomSettings with per-document, then global, then built-in
    precedence for each persisted key.
    @param doc_settings: A DocumentSettings instance, or None.
    @param global_prefs: Mapping of global preferences, defaults to
    L{preferences.prefs}.
    @return: A ZoomSettings instance. '''
    if global_prefs is None:
        global_prefs = prefs
    builtin = ZoomSettings()
    values = {}
    for key in constants.ZOOM_SETTINGS:
        values[key] = _lookup(key, doc_settings, global_prefs,
                              getattr(builtin, key))
    default_mode = global_prefs.get('zoom_mode')
    for key in ('page_margin', 'screen_dpi', 'footer_height',
                'footer_reclaim_height', 'page_scroll'):
        values[key] = global_prefs.get(key, getattr(builtin, key))
    return ZoomSettings(default_mode=default_mode, **values)

# vim: expandtab:sw=4:ts=4
