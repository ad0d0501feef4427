# Zoom actions that can be bound to keys. 'mode' is the zoom mode the action
# switches to, 'zoom' the direction for relative zoom actions.
BINDING_INFO = {
    'zoom_in': {'title': 'Zoom in',
                'zoom': 'in'},
    'zoom_out': {'title': 'Zoom out',
                 'zoom': 'out'},
    'zoom_fit_page': {'title': 'Zoom to fit page',
                      'mode': 'page'},
    'zoom_fit_content': {'title': 'Zoom to fit content',
                         'mode': 'content'},
    'zoom_fit_page_width': {'title': 'Zoom to fit page width',
                            'mode': 'pagewidth'},
    'zoom_fit_content_width': {'title': 'Zoom to fit content width',
                               'mode': 'contentwidth'},
    'zoom_fit_page_height': {'title': 'Zoom to fit page height',
                             'mode': 'pageheight'},
    'zoom_fit_content_height': {'title': 'Zoom to fit content height',
                                'mode': 'contentheight'},
    'zoom_fit_column': {'title': 'Zoom to fit column',
                        'mode': 'column'},
    'zoom_pan': {'title': 'Pan zoom',
                 'mode': 'pan'},
}

# Default bindings, in accelerator syntax.
DEFAULT_BINDINGS = {
    'zoom_in': ['<Shift>Page_Down'],
    'zoom_out': ['<Shift>Page_Up'],
    'zoom_fit_page': ['a'],
    'zoom_fit_content': ['<Shift>a'],
    'zoom_fit_page_width': ['s'],
    'zoom_fit_content_width': ['<Shift>s'],
    'zoom_fit_page_height': ['d'],
    'zoom_fit_content_height': ['<Shift>d'],
    'zoom_fit_column': ['<Shift>c'],
    'zoom_pan': ['<Shift>h'],
}

def action_for_binding(binding):
    ''' Returns the action name bound to <binding> by default, or None. '''
    for name, bindings in DEFAULT_BINDINGS.items():
        if binding in bindings:
            return name
    return None

# vim: expandtab:sw=4:ts=4
