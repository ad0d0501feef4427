''' Handles zoom and fit of pages in the main display area. '''

from pagezoom import log
from pagezoom import rotation
from pagezoom.constants import ZoomMode
from pagezoom.geometry import Size

IDENTITY_ZOOM = 1.0


def usable_viewport(viewport, footer_height=0, reclaim_height=False):
    ''' Returns the part of <viewport> pages are fitted into. The footer is
    subtracted from the height unless it is configured to give its height
    back to the page. '''
    if footer_height and not reclaim_height:
        return Size(viewport.w, viewport.h - footer_height)
    return Size(viewport.w, viewport.h)


def calculate_zoom(mode, viewport, page_size, rotation_deg=0,
                   pan_factor=IDENTITY_ZOOM, free_zoom=IDENTITY_ZOOM):
    ''' Maps a fit mode to a zoom value.
    @param mode: The ZoomMode to fit with.
    @param viewport: Size available for the page, footer already removed.
    @param page_size: Effective page Size (native page or content bbox).
    @param rotation_deg: Display rotation in degrees.
    @param pan_factor: Column count or zoom multiplier for pan/column modes.
    @param free_zoom: The stored zoom, returned unchanged in free mode.
    @return: The zoom value, or None if <mode> is not a known fit mode. '''
    if mode is ZoomMode.FREE:
        return free_zoom

    ratio_w, ratio_h = rotation.fit_ratios(viewport, page_size, rotation_deg)
    if mode in (ZoomMode.CONTENT, ZoomMode.PAGE):
        return min(ratio_w, ratio_h)
    elif mode in (ZoomMode.CONTENT_WIDTH, ZoomMode.PAGE_WIDTH):
        return ratio_w
    elif mode in (ZoomMode.CONTENT_HEIGHT, ZoomMode.PAGE_HEIGHT):
        return ratio_h
    elif mode in (ZoomMode.PAN, ZoomMode.COLUMN):
        return ratio_w * pan_factor

    log.error('Cannot map zoom mode %r to a zoom', mode)
    return None

# vim: expandtab:sw=4:ts=4
