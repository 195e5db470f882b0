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


import datetime, re

import owlfunctional.base
from owlfunctional.base import *


class IRI(str):
  """An absolute IRI. prefixed_name keeps the abbreviation it was read from, or None."""
  __slots__ = ["prefixed_name"]
  def __new__(Class, iri, prefixed_name = None): return str.__new__(Class, iri)

  def __init__(self, iri, prefixed_name = None):
    str.__init__(self)
    self.prefixed_name = prefixed_name

  def __repr__(self): return "<%s>" % self


class locstr(str):
  __slots__ = ["lang"]
  def __new__(Class, s, lang = ""): return str.__new__(Class, s)

  def __init__(self, s, lang = ""):
    str.__init__(self)
    self.lang = lang

  def __eq__(self, other):
    return str.__eq__(self, other) and ((not isinstance(other, locstr)) or (self.lang == other.lang))

  def __hash__(self): return str.__hash__(self)


_DATATYPE_PARSERS = {}
def _datatype_parser(parser, *iris):
  for iri in iris: _DATATYPE_PARSERS[iri] = parser

def _bool_parser(s):
  if s in ("true",  "1"): return True
  if s in ("false", "0"): return False
  raise ValueError("Invalid boolean '%s'!" % s)

_datatype_parser(int, *[XSD + name for name in ("integer", "byte", "short", "int", "long", "unsignedByte", "unsignedShort", "unsignedInt", "unsignedLong", "negativeInteger", "nonNegativeInteger", "positiveInteger", "nonPositiveInteger")])
_datatype_parser(_bool_parser, xsd_boolean)
_datatype_parser(float, xsd_decimal, xsd_double, xsd_float, owl_real)
_datatype_parser(str, xsd_string, XSD + "normalizedString", XSD + "token", XSD + "anyURI", XSD + "Name", XSD + "NCName")
_datatype_parser(datetime.datetime.fromisoformat, xsd_datetime, XSD + "dateTimeStamp")
_datatype_parser(datetime.date.fromisoformat, xsd_date)
_datatype_parser(datetime.time.fromisoformat, xsd_time)


class Literal(Node):
  __slots__ = ()
  datatype  = None
  lang      = None

  def to_python(self):
    """Returns the Python value of the literal (int, float, bool, datetime, ...).

Language-tagged literals give a locstr; unknown datatypes and malformed values give the lexical form."""
    if not self.lang is None: return locstr(self.lexical, self.lang)
    parser = _DATATYPE_PARSERS.get(self.datatype)
    if parser is None: return self.lexical
    try:
      return parser(self.lexical)
    except ValueError:
      return self.lexical

class PlainLiteral(Literal):
  __slots__ = _fields = ("lexical",)

class LanguageTaggedLiteral(Literal):
  __slots__ = _fields = ("lexical", "lang")

class TypedLiteral(Literal):
  __slots__ = _fields = ("lexical", "datatype")


class ClassExpression(Node):
  __slots__ = ()

class DataRange(Node):
  __slots__ = ()

class ObjectPropertyExpression(Node):
  __slots__ = ()

class Individual(Node):
  __slots__ = ()


class Entity(Node):
  __slots__ = ()
  _fields   = ("iri",)

  def __repr__(self): return "%s(%r)" % (self.__class__.__name__, self.iri)

class Class             (Entity, ClassExpression):          __slots__ = ("iri",)
class Datatype          (Entity, DataRange):                __slots__ = ("iri",)
class ObjectProperty    (Entity, ObjectPropertyExpression): __slots__ = ("iri",)
class DataProperty      (Entity):                           __slots__ = ("iri",)
class AnnotationProperty(Entity):                           __slots__ = ("iri",)
class NamedIndividual   (Entity, Individual):               __slots__ = ("iri",)

class AnonymousIndividual(Individual):
  __slots__ = _fields = ("label",)

  def __repr__(self): return "_:%s" % self.label


_IRI_TOKENS = ("FULL_IRI", "PNAME")

def read_iri(ctx):
  type = ctx.type()
  if type == "FULL_IRI": return IRI(ctx.next()[1:-1])
  if type == "PNAME":
    pname = ctx.value()
    try:
      iri = ctx.prefixes.expand(pname)
    except OwlFunctionalPrefixError as e:
      raise ctx.error(e.__class__, e.message) from e
    ctx.next()
    return IRI(iri, pname)
  raise ctx.unexpected(_IRI_TOKENS, "IRI")

_STRING_ESCAPE = re.compile(r'\\([\\"])')

def _unquote(s): return _STRING_ESCAPE.sub(r"\1", s[1:-1])

def read_literal(ctx):
  lexical = _unquote(ctx.expect("STRING", "literal"))
  if ctx.at("^^"):
    ctx.next()
    return TypedLiteral(lexical, read_iri(ctx))
  if ctx.at("LANGTAG"):
    return LanguageTaggedLiteral(lexical, ctx.next()[1:])
  return PlainLiteral(lexical)

def _shorten(s, length = 20):
  if len(s) <= length: return s
  return "%s...(%s digits)" % (s[:length], len(s))

def read_integer(ctx):
  if not ctx.at("INTEGER"): raise ctx.unexpected(("INTEGER",), "non-negative integer")
  digits = ctx.value().lstrip("0") or "0"
  if (len(digits) > len(str(owlfunctional.base.MAX_CARDINALITY))) or (int(digits) > owlfunctional.base.MAX_CARDINALITY):
    raise ctx.error(OwlFunctionalLexicalError, "integer %s out of range (maximum %s)" % (_shorten(digits), owlfunctional.base.MAX_CARDINALITY))
  value = int(digits)
  ctx.next()
  return value

def read_anonymous_individual(ctx): return AnonymousIndividual(ctx.expect("BLANK_NODE", "blank node")[2:])

def read_individual(ctx):
  if ctx.at("BLANK_NODE"): return read_anonymous_individual(ctx)
  if ctx.at_iri(): return NamedIndividual(read_iri(ctx))
  raise ctx.unexpected(("FULL_IRI", "PNAME", "BLANK_NODE"), "individual")

def read_class              (ctx): return Class             (read_iri(ctx))
def read_datatype           (ctx): return Datatype          (read_iri(ctx))
def read_object_property    (ctx): return ObjectProperty    (read_iri(ctx))
def read_data_property      (ctx): return DataProperty      (read_iri(ctx))
def read_annotation_property(ctx): return AnnotationProperty(read_iri(ctx))

ENTITIES = { Kind.__name__ : Kind for Kind in [Class, Datatype, ObjectProperty, DataProperty, AnnotationProperty, NamedIndividual] }

def read_entity(ctx):
  keyword = ctx.keyword()
  Kind    = ENTITIES.get(keyword)
  if Kind is None: raise ctx.unexpected(ENTITIES, "entity")
  ctx.open(keyword)
  iri = read_iri(ctx)
  ctx.close(keyword)
  return Kind(iri)
