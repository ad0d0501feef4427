''' Determines the page size zoom modes fit against. '''

from pagezoom import constants
from pagezoom import log
from pagezoom.geometry import Size


class BBoxResolver(object):

    def __init__(self, document, view):
        self._document = document
        self._view = view

    def resolve(self, page, mode):
        ''' Returns the effective page size for <page> in <mode>, and tells
        the view which bounding box (if any) the zoom is fitted against.
        @param page: The page number, starting at 1.
        @param mode: The active ZoomMode.
        @return: A tuple (effective Size, bbox Size or None). '''
        page_size = Size(*self._document.get_native_page_size(page))
        bbox = None
        if mode in constants.CONTENT_AWARE_MODES:
            used = Size(*self._document.get_used_bbox_size(
                page, constants.BBOX_REFERENCE_SCALE))
            # A bbox larger than the native page comes from bogus page
            # boxes; render the full page instead.
            if used.fits_in(page_size):
                bbox = page_size = used
        elif mode not in constants.PAGE_MODES:
            log.debug('Zoom mode %r unknown, which should never occur', mode)
        self._view.on_bbox_changed(bbox)
        return page_size, bbox

# vim: expandtab:sw=4:ts=4
