#!/usr/bin/env python
# vim:fileencoding=utf8

# Copyright (c) 2026 The turkstem developers
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
States and suffix machines.
"""

__all__ = ['MorphotacticsError', 'State', 'Machine']


class MorphotacticsError(ValueError):
    """
    Raised when a suffix machine cannot be built from its definition.
    """


class State(object):
    """
    A state of a suffix machine.

    ``suffixes`` are the suffixes that may be removed when the machine is
    in this state, in the order in which they are tried.
    """

    def __init__(self, name, initial, final, suffixes=()):
        self.name = name
        self.initial = bool(initial)
        self.final = bool(final)
        self.suffixes = tuple(suffixes)

    def __repr__(self):
        flags = ''.join([' initial' if self.initial else '',
                         ' final' if self.final else ''])
        return '<State %s%s>' % (self.name, flags)


class Machine(object):
    """
    A finite state machine over suffixes.

    ``suffixes`` is the ordered suffix catalog, ``states`` the ordered
    list of states. ``edges`` maps ``(state name, suffix id)`` to the name
    of the next state. Exactly one state must be initial and every edge
    must refer to known states and suffixes, otherwise
    ``MorphotacticsError`` is raised.
    """

    def __init__(self, name, suffixes, states, edges):
        self.name = name
        self.suffixes = tuple(suffixes)
        self.states = tuple(states)

        self._suffixes_by_id = {}
        for suffix in self.suffixes:
            if suffix.id in self._suffixes_by_id:
                raise MorphotacticsError("Duplicate suffix '%s' in machine "
                                         "'%s'." % (suffix.id, name))
            self._suffixes_by_id[suffix.id] = suffix

        states_by_name = {}
        for state in self.states:
            if state.name in states_by_name:
                raise MorphotacticsError("Duplicate state '%s' in machine "
                                         "'%s'." % (state.name, name))
            states_by_name[state.name] = state
            for suffix in state.suffixes:
                if self._suffixes_by_id.get(suffix.id) is not suffix:
                    raise MorphotacticsError("State '%s' of machine '%s' "
                            "uses unknown suffix '%s'." % (state.name, name,
                            suffix.id))

        initial = [state for state in self.states if state.initial]
        if len(initial) != 1:
            raise MorphotacticsError("Machine '%s' must have exactly one "
                    "initial state, found %d." % (name, len(initial)))
        self.initial_state = initial[0]

        self._table = {}
        for (state_name, suffix_id), target in edges.items():
            if state_name not in states_by_name:
                raise MorphotacticsError("Unknown state '%s' in machine "
                                         "'%s'." % (state_name, name))
            if suffix_id not in self._suffixes_by_id:
                raise MorphotacticsError("Unknown suffix '%s' in machine "
                                         "'%s'." % (suffix_id, name))
            if target not in states_by_name:
                raise MorphotacticsError("Transition %s --%s--> %s of "
                        "machine '%s' leads to an unknown state." % (
                        state_name, suffix_id, target, name))
            self._table[(states_by_name[state_name], suffix_id)] = \
                    states_by_name[target]

    def __repr__(self):
        return '<Machine %s: %d suffixes, %d states>' % (self.name,
                len(self.suffixes), len(self.states))

    def suffix(self, suffix_id):
        """
        Return the suffix with the given id.
        """
        return self._suffixes_by_id[suffix_id]

    def state(self, name):
        """
        Return the state with the given name.
        """
        for state in self.states:
            if state.name == name:
                return state
        raise KeyError(name)

    def next_state(self, state, suffix):
        """
        Return the state reached by removing ``suffix`` in ``state``.

        Returns ``None`` if the machine has no such transition.
        """
        return self._table.get((state, suffix.id))
