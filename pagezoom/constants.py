# -*- coding: utf-8 -*-
'''constants.py - Miscellaneous constants.'''

import os
import enum

from pagezoom import tools

APPNAME = 'PageZoom'
VERSION = '0.4.0.dev0'

REQUIRED_PIL_VERSION = '5.1.0'

CONFIG_DIR = tools.get_config_directory()
PREFERENCE_PATH = os.path.join(CONFIG_DIR, 'preferences.conf')


class ZoomMode(enum.Enum):
    ''' Fit policies. The value is the name used in settings files. '''

    CONTENT = 'content'
    CONTENT_WIDTH = 'contentwidth'
    CONTENT_HEIGHT = 'contentheight'
    COLUMN = 'column'
    PAGE_WIDTH = 'pagewidth'
    PAGE_HEIGHT = 'pageheight'
    PAGE = 'page'
    PAN = 'pan'
    FREE = 'free'

DEFAULT_ZOOM_MODE = ZoomMode.PAGE_WIDTH

#: Modes that fit against the used-content bounding box.
CONTENT_AWARE_MODES = frozenset((
    ZoomMode.CONTENT, ZoomMode.CONTENT_WIDTH, ZoomMode.CONTENT_HEIGHT,
    ZoomMode.COLUMN, ZoomMode.PAN))
#: Modes that fit against the whole native page.
PAGE_MODES = frozenset((
    ZoomMode.PAGE_WIDTH, ZoomMode.PAGE_HEIGHT, ZoomMode.PAGE, ZoomMode.FREE))

#: Modes that work best with page view (warned about in scroll mode).
PAGED_MODES = frozenset((
    ZoomMode.PAGE, ZoomMode.PAGE_HEIGHT, ZoomMode.CONTENT_HEIGHT,
    ZoomMode.CONTENT))
#: Modes that need page view (warned about in scroll mode).
PANNED_MODES = frozenset((ZoomMode.COLUMN, ZoomMode.PAN))
ADVISORY_PAGED, ADVISORY_PANNED = 'paged', 'panned'

ZOOM_IN, ZOOM_OUT = 'in', 'out'
ZOOM_IN_FACTOR = 4.0 / 3
ZOOM_OUT_FACTOR = 0.75

GESTURE_HORIZONTAL, GESTURE_VERTICAL, GESTURE_DIAGONAL = \
    'horizontal', 'vertical', 'diagonal'

#: Reference scale used when asking the document for the used bbox.
BBOX_REFERENCE_SCALE = 1

#: Only zoom values above this are checked against the render cache.
CACHE_CHECK_THRESHOLD = 10
#: Per-bitmap bookkeeping added to the pixel count when estimating cost.
CACHE_COST_OVERHEAD = 64

ZOOM_FACTOR_MIN_COLUMN = 2
ZOOM_FACTOR_MIN_PAN = 1.5
ZOOM_FACTOR_MAX = 10
PAN_OVERLAP_MIN, PAN_OVERLAP_MAX = 0, 90

PAN_OVERLAP_SETTINGS = ('overlap_h', 'overlap_v')
PAN_FLAG_SETTINGS = ('right_to_left', 'bottom_to_top', 'vertical_pan')
#: Everything saved per document, in save order.
ZOOM_SETTINGS = ('zoom_mode', 'zoom_factor') + PAN_OVERLAP_SETTINGS + \
    PAN_FLAG_SETTINGS

# vim: expandtab:sw=4:ts=4
