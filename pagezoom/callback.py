# -*- coding: utf-8 -*-

import traceback
import types
import weakref

from pagezoom import log

class CallbackList(object):
    """ Helper class for implementing callbacks.
    Add listeners to method calls with method += callback_function. """

    def __init__(self, obj, function):
        self.__callbacks = []
        self.__object = obj
        self.__function = function

    def __call__(self, *args, **kwargs):
        """ Runs the wrapped function. After the funtion has finished,
        callbacks are run, on the calling thread and in the order they
        were added. """

        if self.__object is not None:
            # Assume that the Callback object is bound to a class method.
            result = self.__function(self.__object, *args, **kwargs)
        else:
            # Otherwise, the callback should be bound to a normal function.
            result = self.__function(*args, **kwargs)

        self.__run_callbacks(*args, **kwargs)
        return result

    def __iadd__(self, function):
        """ Support for 'method += callback_function' syntax. """
        obj, func = self.__get_function(function)

        if (obj, func) not in self.__callbacks:
            self.__callbacks.append((obj, func))

        return self

    def __isub__(self, function):
        """ Support for 'method -= callback_function' syntax. """
        obj, func = self.__get_function(function)

        if (obj, func) in self.__callbacks:
            self.__callbacks.remove((obj, func))

        return self

    def __len__(self):
        return len(self.__callbacks)

    def __run_callbacks(self, *args, **kwargs):
        """ Executes callback functions. """
        for obj_ref, func in list(self.__callbacks):

            if obj_ref is None:
                # Callback is a normal function
                callback = func
            elif obj_ref() is not None:
                # Callback is a bound method.
                # Recreate it by binding the function to the object.
                callback = func.__get__(obj_ref())
            else:
                # Callback is a bound method, object
                # no longer exists.
                callback = None

            if callback:
                try:
                    callback(*args, **kwargs)
                except Exception as e:
                    log.error('! Callback %(function)r failed: %(error)s',
                              { 'function' : callback, 'error' : e })
                    log.debug('Traceback:\n%s', traceback.format_exc())

    def __callback_deleted(self, obj_ref):
        """ Called whenever one of the callback objects is collected by gc.
        This removes all callback functions registered by the object. """
        self.__callbacks = [callback for callback in self.__callbacks
                            if callback[0] != obj_ref]

    def __get_function(self, func):
        """ If <func> is a normal function, return (None, func).
        If <func> is a bound method, return (weakref(obj), func), with <obj>
        being the object <func> is bound to. This is required since
        weak references do not work on bound methods. """

        if isinstance(func, types.MethodType):
            return (weakref.ref(func.__self__, self.__callback_deleted),
                    func.__func__)
        else:
            return (None, func)

class Callback(object):
    """ Decorator class for using the CallbackList helper. """

    def __init__(self, function):
        # This is the function the Callback is decorating.
        self.__function = function
        self.__name = '_callbacks_' + function.__name__

    def __get__(self, obj, cls):
        """ Descriptor interface: each instance gets its own CallbackList,
        created on first access and kept on the instance, so listeners
        added with += survive later lookups. """
        if obj is None:
            return self
        callbacks = obj.__dict__.get(self.__name)
        if callbacks is None:
            callbacks = CallbackList(obj, self.__function)
            obj.__dict__[self.__name] = callbacks
        return callbacks

    def __set__(self, obj, value):
        """ 'obj.method += function' rebinds the attribute; accept our own
        list back. """
        if value is not self.__get__(obj, type(obj)):
            raise AttributeError('Callback attributes cannot be replaced')

# vim: expandtab:sw=4:ts=4
