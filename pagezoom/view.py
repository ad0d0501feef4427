# -*- coding: utf-8 -*-

''' Base class for the view side of zoom computations. '''


class ZoomSink(object):
    ''' Receives the results of zoom computations. '''

    def on_bbox_changed(self, bbox):
        ''' Called with the used-content Size the zoom was fitted against,
        or None when the whole page is used. '''
        raise NotImplementedError()

    def on_zoom_changed(self, zoom):
        raise NotImplementedError()

    def set_zoom_center(self, x, y):
        ''' Centers the view on (x, y), in page pixels at the current zoom. '''
        raise NotImplementedError()

    def get_single_page_position(self, pos):
        ''' Projects the screen Point <pos> into page space.
        @return: A PagePosition with the page coordinates and the zoom the
        page is currently displayed at. '''
        raise NotImplementedError()

# vim: expandtab:sw=4:ts=4
