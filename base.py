# -*- coding: utf-8 -*-
# Owlfunctional
# Copyright (C) 2013-2019 Jean-Baptiste LAMY
# LIMICS (Laboratoire d'informatique médicale et d'ingénierie des connaissances en santé), UMR_S 1142
# University Paris 13, Sorbonne paris-Cité, Bobigny, France

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.

# You should have received a copy of the GNU Lesser General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import sys


class OwlFunctionalError(Exception): pass

class OwlFunctionalParsingError(OwlFunctionalError):
  def __init__(self, message, offset = None, line = None, column = None, expected = ()):
    super().__init__(message)
    self.message  = message
    self.offset   = offset
    self.line     = line
    self.column   = column
    self.expected = frozenset(expected)

  def __str__(self):
    s = self.message
    if not self.line is None: s = "%s (line %s, column %s)" % (s, self.line, self.column)
    if self.expected:         s = "%s, expected one of: %s" % (s, " ".join(sorted(self.expected)))
    return s

class OwlFunctionalLexicalError         (OwlFunctionalParsingError): pass
class OwlFunctionalStructuralError      (OwlFunctionalParsingError): pass
class OwlFunctionalArityError           (OwlFunctionalStructuralError): pass
class OwlFunctionalNestingError         (OwlFunctionalStructuralError): pass
class OwlFunctionalPrefixError          (OwlFunctionalParsingError): pass
class OwlFunctionalUndeclaredPrefixError(OwlFunctionalPrefixError): pass
class OwlFunctionalDuplicatedPrefixError(OwlFunctionalPrefixError): pass
class OwlFunctionalInputTooLargeError   (OwlFunctionalParsingError): pass


_LOG_LEVEL = 0
def set_log_level(x):
  global _LOG_LEVEL
  _LOG_LEVEL = x

def _log(level, message):
  if _LOG_LEVEL >= level: print("* Owlfunctional * %s" % message, file = sys.stderr)


# Defaults, read at each parse; can be overridden per call
MAX_DEPTH       = 128
MAX_INPUT_SIZE  = 64 * 1024 * 1024
MAX_CARDINALITY = 2 ** 32 - 1


RDF  = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
XSD  = "http://www.w3.org/2001/XMLSchema#"
OWL  = "http://www.w3.org/2002/07/owl#"

owl_thing                = OWL  + "Thing"
owl_real                 = OWL  + "real"
rdfs_literal             = RDFS + "Literal"
rdf_lang_range           = RDF  + "langRange"

xsd_string               = XSD  + "string"
xsd_integer              = XSD  + "integer"
xsd_boolean              = XSD  + "boolean"
xsd_decimal              = XSD  + "decimal"
xsd_double               = XSD  + "double"
xsd_float                = XSD  + "float"
xsd_datetime             = XSD  + "dateTime"
xsd_date                 = XSD  + "date"
xsd_time                 = XSD  + "time"

FACETS = frozenset([
  XSD + "length", XSD + "minLength", XSD + "maxLength", XSD + "pattern", rdf_lang_range,
  XSD + "minInclusive", XSD + "minExclusive", XSD + "maxInclusive", XSD + "maxExclusive",
  XSD + "totalDigits", XSD + "fractionDigits",
])


class Node(object):
  """Base class of the syntax tree.

Nodes are immutable: their fields are given once, in the order of ``_fields``,
and cannot be reassigned. Lists are stored as tuples. Two nodes are equal when
they have the same class and equal fields."""
  __slots__ = ()
  _fields   = ()
  _defaults = ()

  def __init__(self, *values):
    nb_missing = len(self._fields) - len(values)
    if (nb_missing < 0) or (nb_missing > len(self._defaults)):
      raise TypeError("%s() takes %s arguments (%s given)!" % (self.__class__.__name__, len(self._fields), len(values)))
    if nb_missing: values = values + self._defaults[len(self._defaults) - nb_missing :]
    for field, value in zip(self._fields, values):
      if isinstance(value, list): value = tuple(value)
      object.__setattr__(self, field, value)

  def __setattr__(self, attr, value): raise AttributeError("%s is immutable!" % self.__class__.__name__)
  def __delattr__(self, attr):        raise AttributeError("%s is immutable!" % self.__class__.__name__)

  def _values(self): return tuple(getattr(self, field) for field in self._fields)

  def __eq__(self, other): return (self.__class__ is other.__class__) and (self._values() == other._values())
  def __ne__(self, other): return not self.__eq__(other)
  def __hash__(self): return hash((self.__class__.__name__, self._values()))

  def __reduce__(self): return (self.__class__, self._values())

  def __repr__(self): return "%s(%s)" % (self.__class__.__name__, ", ".join(repr(value) for value in self._values()))
