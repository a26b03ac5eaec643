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
Grammar and parser for suffix machine definitions.

Suffix catalogs and state tables are written in a small declarative
language::

    machine derivational (
        suffixes (
            S1 '-lU' ('lı' 'li' 'lu' 'lü')
        )
        states (
            A initial (S1 -> B)
            B final ()
        )
    )

Each suffix has an id, a name, its surface forms, optionally a list of
letters that may be dropped after the suffix (``optional ('y')``) and
the ``noharmony`` flag for suffixes that are removed regardless of vowel
harmony. Each state
lists its outgoing transitions in the order in which they are tried.
Comments use C or C++ syntax.
"""

import logging

from pyparsing import (Combine, Group, Keyword, MatchFirst, OneOrMore,
                       Optional, ParseBaseException, QuotedString, StringEnd,
                       Suppress, Word, ZeroOrMore, alphanums, alphas,
                       c_style_comment, dbl_slash_comment)

from turkstem.states import Machine, MorphotacticsError, State
from turkstem.suffixes import Suffix


__all__ = ['parse_string', 'parse_file']


logger = logging.getLogger(__name__)


# Grammar elements are in all-caps.


class StateDefinition(object):
    """
    A parsed state whose transitions have not been resolved yet.
    """

    def __init__(self, name, initial, final, edges):
        self.name = name
        self.initial = initial
        self.final = final
        self.edges = edges


class MachineDefinition(object):

    def __init__(self, name, suffixes, states):
        self.name = name
        self.suffixes = suffixes
        self.states = states


LPAREN = Suppress('(')
RPAREN = Suppress(')')
ARROW = Suppress('->')


#
# KEYWORDS
#

keywords = []

def make_keyword(s):
    kw = Keyword(s)
    globals()[s.upper()] = kw
    keywords.append(kw)

for _keyword in 'machine suffixes states optional noharmony initial final'.split():
    make_keyword(_keyword)

KEYWORD = MatchFirst(keywords)


#
# NAMES AND STRINGS
#

NAME = Combine(~KEYWORD + Word(alphas, alphanums + '_'))
STRING = QuotedString("'")
STRINGS = Group(LPAREN + OneOrMore(STRING) + RPAREN)


#
# SUFFIXES
#

def suffix_def_action(tokens):
    optional = tokens.get('optional')
    return Suffix(tokens['id'], tokens['name'], list(tokens['pattern']),
                  list(optional) if optional is not None else None,
                  'noharmony' not in tokens)

SUFFIX_DEF = (NAME('id') + STRING('name') + STRINGS('pattern') +
              Optional(Suppress(OPTIONAL) + STRINGS('optional')) +
              Optional(NOHARMONY('noharmony')))
SUFFIX_DEF.set_parse_action(suffix_def_action)


#
# STATES
#

def state_def_action(tokens):
    edges = [(edge[0], edge[1]) for edge in tokens.get('edges', [])]
    return StateDefinition(tokens['name'], 'initial' in tokens,
                           'final' in tokens, edges)

EDGE = Group(NAME + ARROW + NAME)
STATE_DEF = (NAME('name') + Optional(INITIAL('initial')) +
             Optional(FINAL('final')) + LPAREN +
             Group(ZeroOrMore(EDGE))('edges') + RPAREN)
STATE_DEF.set_parse_action(state_def_action)


#
# MACHINES
#

def machine_def_action(tokens):
    return MachineDefinition(tokens['name'], list(tokens['suffixes']),
                             list(tokens['states']))

MACHINE_DEF = (Suppress(MACHINE) + NAME('name') + LPAREN +
               Suppress(SUFFIXES) + LPAREN +
               Group(OneOrMore(SUFFIX_DEF))('suffixes') + RPAREN +
               Suppress(STATES) + LPAREN +
               Group(OneOrMore(STATE_DEF))('states') + RPAREN + RPAREN)
MACHINE_DEF.set_parse_action(machine_def_action)

PROGRAM = ZeroOrMore(MACHINE_DEF) + StringEnd()
PROGRAM.ignore(c_style_comment | dbl_slash_comment)


def build_machine(definition):
    """
    Resolve the references of a parsed machine definition.
    """
    suffixes = {}
    for suffix in definition.suffixes:
        suffixes.setdefault(suffix.id, suffix)
    states = []
    edges = {}
    for state_def in definition.states:
        outgoing = []
        for suffix_id, target in state_def.edges:
            if suffix_id not in suffixes:
                raise MorphotacticsError("State '%s' of machine '%s' uses "
                        "unknown suffix '%s'." % (state_def.name,
                        definition.name, suffix_id))
            if (state_def.name, suffix_id) in edges:
                raise MorphotacticsError("State '%s' of machine '%s' has "
                        "more than one transition for suffix '%s'." % (
                        state_def.name, definition.name, suffix_id))
            outgoing.append(suffixes[suffix_id])
            edges[(state_def.name, suffix_id)] = target
        states.append(State(state_def.name, state_def.initial,
                            state_def.final, outgoing))
    return Machine(definition.name, definition.suffixes, states, edges)


#
# PUBLIC INTERFACE
#

def parse_string(s):
    """
    Parse a string containing machine definitions.

    Returns a dict that maps machine names to ``Machine`` instances.
    ``MorphotacticsError`` is raised if the definitions are invalid.
    """
    try:
        definitions = PROGRAM.parse_string(s)
    except ParseBaseException as e:
        raise MorphotacticsError(
                'Invalid machine definition in line %d, column %d: %s\n%s\n%s^'
                % (e.lineno, e.col, e.msg, e.line, ' ' * (e.col - 1))) from e
    machines = {}
    for definition in definitions:
        if definition.name in machines:
            raise MorphotacticsError("Duplicate machine '%s'." %
                                     definition.name)
        machines[definition.name] = build_machine(definition)
        logger.debug('Built %r', machines[definition.name])
    return machines


def parse_file(infile):
    """
    Parse machine definitions from an open readable file.

    See ``parse_string``.
    """
    return parse_string(infile.read())
