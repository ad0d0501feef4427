""" preferences.py - Contains the preferences and the functions to read and
write them.  """

import os
import json

from pagezoom import constants
from pagezoom import log

# All the preferences are stored here. These are the global defaults;
# per-document values override them (see settings.py).
prefs = {
    'zoom_mode': constants.DEFAULT_ZOOM_MODE.value,
    # for column or pan modes: fit to width/zoom_factor, with overlap of
    # overlap_h % (horizontally) and overlap_v % (vertically).
    # In column mode, zoom_factor is the number of columns.
    'zoom_factor': 2,
    'overlap_h': 40,
    'overlap_v': 40,
    'right_to_left': False,
    'bottom_to_top': False,
    'vertical_pan': False,
    'page_margin': 0.06,  # inches
    'screen_dpi': 160,
    'footer_height': 0,
    'footer_reclaim_height': False,
    'page_scroll': False,
    'render_cache_size': 64 * 1024 * 1024,  # bytes
    'render_cache_mode': 'L',  # PIL mode of decoded page bitmaps
}

def read_preferences_file():
    """Read preferences data from disk."""

    saved_prefs = None

    if os.path.isfile(constants.PREFERENCE_PATH):
        try:
            with open(constants.PREFERENCE_PATH, 'r') as config_file:
                saved_prefs = json.load(config_file)
        except (OSError, ValueError) as e:
            corrupt_name = '%s.broken' % constants.PREFERENCE_PATH
            log.warning('! Corrupt preferences file, moving to "%s": %s',
                        corrupt_name, e)
            if os.path.isfile(corrupt_name):
                os.unlink(corrupt_name)

            os.rename(constants.PREFERENCE_PATH, corrupt_name)

    if saved_prefs:
        for key in saved_prefs:
            if key in prefs:
                prefs[key] = saved_prefs[key]

def write_preferences_file():
    """Write preference data to disk."""
    config_dir = os.path.dirname(constants.PREFERENCE_PATH)
    if not os.path.isdir(config_dir):
        os.makedirs(config_dir)
    with open(constants.PREFERENCE_PATH, 'w') as config_file:
        json.dump(prefs, config_file, indent=2)

# vim: expandtab:sw=4:ts=4
