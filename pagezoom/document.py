# -*- coding: utf-8 -*-

''' Base class for the document side of zoom computations. The engine only
needs page geometry and content block lookups; rendering and decoding stay
with the concrete document implementation. '''


class DocumentGeometry(object):
    ''' Page geometry interface. Pages are indexed from 1. Queries may be
    expensive (they can imply a partial re-layout); callers of the engine
    should not expect results to be cached. '''

    def get_native_page_size(self, page):
        ''' Returns the native Size of <page>. '''
        raise NotImplementedError()

    def get_used_bbox_size(self, page, zoom):
        ''' Returns the Size of the used-content bounding box of <page> at
        scale <zoom>. It may be larger than the native page for documents
        with broken page boxes. '''
        raise NotImplementedError()

    def get_content_block(self, page, x, y):
        ''' Returns the Block covering the page fraction (x, y), or None if
        no content block is found there. '''
        raise NotImplementedError()

    def is_reflowable(self):
        return False

    def convert_font_size(self, font_size):
        ''' Maps a reader font size to the one used for re-layout. '''
        return font_size

    def layout_document(self, font_size):
        ''' Lays out a reflowable document at <font_size>. '''
        raise NotImplementedError()

# vim: expandtab:sw=4:ts=4
