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


from owlfunctional.base import *
from owlfunctional.model import *


class ObjectInverseOf(ObjectPropertyExpression):
  __slots__ = _fields = ("property",)


class ObjectIntersectionOf(ClassExpression):
  __slots__ = _fields = ("operands",)

class ObjectUnionOf(ClassExpression):
  __slots__ = _fields = ("operands",)

class ObjectComplementOf(ClassExpression):
  __slots__ = _fields = ("operand",)

class ObjectOneOf(ClassExpression):
  __slots__ = _fields = ("individuals",)

class ObjectSomeValuesFrom(ClassExpression):
  __slots__ = _fields = ("property", "filler")

class ObjectAllValuesFrom(ClassExpression):
  __slots__ = _fields = ("property", "filler")

class ObjectHasValue(ClassExpression):
  __slots__ = _fields = ("property", "individual")

class ObjectHasSelf(ClassExpression):
  __slots__ = _fields = ("property",)


class _Cardinality(ClassExpression):
  """Cardinality restriction; filler is None when unqualified."""
  __slots__ = ()
  _defaults = (None,)

  @property
  def effective_filler(self):
    if self.filler is None: return self._default_filler
    return self.filler

class _ObjectCardinality(_Cardinality):
  __slots__ = ()
  _default_filler = Class(IRI(owl_thing))

class ObjectMinCardinality  (_ObjectCardinality): __slots__ = _fields = ("cardinality", "property", "filler")
class ObjectMaxCardinality  (_ObjectCardinality): __slots__ = _fields = ("cardinality", "property", "filler")
class ObjectExactCardinality(_ObjectCardinality): __slots__ = _fields = ("cardinality", "property", "filler")


class DataSomeValuesFrom(ClassExpression):
  __slots__ = _fields = ("properties", "filler")

class DataAllValuesFrom(ClassExpression):
  __slots__ = _fields = ("properties", "filler")

class DataHasValue(ClassExpression):
  __slots__ = _fields = ("property", "literal")

class _DataCardinality(_Cardinality):
  __slots__ = ()
  _default_filler = Datatype(IRI(rdfs_literal))

class DataMinCardinality  (_DataCardinality): __slots__ = _fields = ("cardinality", "property", "filler")
class DataMaxCardinality  (_DataCardinality): __slots__ = _fields = ("cardinality", "property", "filler")
class DataExactCardinality(_DataCardinality): __slots__ = _fields = ("cardinality", "property", "filler")


class DataIntersectionOf(DataRange):
  __slots__ = _fields = ("operands",)

class DataUnionOf(DataRange):
  __slots__ = _fields = ("operands",)

class DataComplementOf(DataRange):
  __slots__ = _fields = ("operand",)

class DataOneOf(DataRange):
  __slots__ = _fields = ("literals",)

class DatatypeRestriction(DataRange):
  __slots__ = _fields = ("datatype", "restrictions")

class FacetRestriction(Node):
  __slots__ = _fields = ("facet", "literal")



def read_class_expression(ctx):
  reader = CLASS_EXPRESSIONS.get(ctx.keyword())
  if reader:
    with ctx.nested: return reader(ctx)
  if ctx.at_iri(): return Class(read_iri(ctx))
  raise ctx.unexpected(_CLASS_EXPRESSION_STARTS, "class expression")

def read_data_range(ctx):
  reader = DATA_RANGES.get(ctx.keyword())
  if reader:
    with ctx.nested: return reader(ctx)
  if ctx.at_iri(): return Datatype(read_iri(ctx))
  raise ctx.unexpected(_DATA_RANGE_STARTS, "data range")

def read_object_property_expression(ctx):
  if ctx.at_keyword("ObjectInverseOf"):
    ctx.open("ObjectInverseOf")
    property = read_object_property(ctx)
    ctx.close("ObjectInverseOf")
    return ObjectInverseOf(property)
  if ctx.at_iri(): return ObjectProperty(read_iri(ctx))
  raise ctx.unexpected(("ObjectInverseOf", "FULL_IRI", "PNAME"), "object property expression")

def read_facet_restriction(ctx):
  pos   = ctx.pos
  facet = read_iri(ctx)
  if not facet in FACETS: raise ctx.error(OwlFunctionalStructuralError, "invalid facet <%s>" % facet, pos = pos)
  return FacetRestriction(facet, read_literal(ctx))


def _fixed(Construct, *read_operands):
  keyword = Construct.__name__
  def read(ctx):
    ctx.open(keyword)
    operands = [read_operand(ctx) for read_operand in read_operands]
    ctx.close(keyword)
    return Construct(*operands)
  return read

def _n_ary(Construct, read_operand, minimum):
  keyword = Construct.__name__
  def read(ctx):
    ctx.open(keyword)
    operands = ctx.sequence(keyword, read_operand, minimum)
    ctx.close(keyword)
    return Construct(operands)
  return read

def _cardinality(Construct, read_property, read_filler):
  keyword = Construct.__name__
  def read(ctx):
    ctx.open(keyword)
    cardinality = read_integer(ctx)
    property    = read_property(ctx)
    if ctx.at(")"): filler = None
    else:           filler = read_filler(ctx)
    ctx.close(keyword)
    return Construct(cardinality, property, filler)
  return read

def _data_values_from(Construct):
  keyword = Construct.__name__
  def read(ctx):
    ctx.open(keyword)
    properties = []
    # An IRI directly followed by ')' is the data range, never a data property
    while ctx.at_iri() and (ctx.type(1) != ")"): properties.append(read_data_property(ctx))
    if not properties:
      raise ctx.error(OwlFunctionalArityError, "%s requires at least 1 data property before the data range" % keyword, ("FULL_IRI", "PNAME"))
    filler = read_data_range(ctx)
    ctx.close(keyword)
    return Construct(properties, filler)
  return read

def _read_datatype_restriction(ctx):
  ctx.open("DatatypeRestriction")
  datatype     = read_datatype(ctx)
  restrictions = ctx.sequence("DatatypeRestriction", read_facet_restriction, 1)
  ctx.close("DatatypeRestriction")
  return DatatypeRestriction(datatype, restrictions)


CLASS_EXPRESSIONS = {
  "ObjectIntersectionOf"   : _n_ary(ObjectIntersectionOf, read_class_expression, 2),
  "ObjectUnionOf"          : _n_ary(ObjectUnionOf,        read_class_expression, 2),
  "ObjectComplementOf"     : _fixed(ObjectComplementOf,   read_class_expression),
  "ObjectOneOf"            : _n_ary(ObjectOneOf,          read_individual, 1),
  "ObjectSomeValuesFrom"   : _fixed(ObjectSomeValuesFrom, read_object_property_expression, read_class_expression),
  "ObjectAllValuesFrom"    : _fixed(ObjectAllValuesFrom,  read_object_property_expression, read_class_expression),
  "ObjectHasValue"         : _fixed(ObjectHasValue,       read_object_property_expression, read_individual),
  "ObjectHasSelf"          : _fixed(ObjectHasSelf,        read_object_property_expression),
  "ObjectMinCardinality"   : _cardinality(ObjectMinCardinality,   read_object_property_expression, read_class_expression),
  "ObjectMaxCardinality"   : _cardinality(ObjectMaxCardinality,   read_object_property_expression, read_class_expression),
  "ObjectExactCardinality" : _cardinality(ObjectExactCardinality, read_object_property_expression, read_class_expression),
  "DataSomeValuesFrom"     : _data_values_from(DataSomeValuesFrom),
  "DataAllValuesFrom"      : _data_values_from(DataAllValuesFrom),
  "DataHasValue"           : _fixed(DataHasValue,         read_data_property, read_literal),
  "DataMinCardinality"     : _cardinality(DataMinCardinality,   read_data_property, read_data_range),
  "DataMaxCardinality"     : _cardinality(DataMaxCardinality,   read_data_property, read_data_range),
  "DataExactCardinality"   : _cardinality(DataExactCardinality, read_data_property, read_data_range),
}

DATA_RANGES = {
  "DataIntersectionOf"     : _n_ary(DataIntersectionOf, read_data_range, 2),
  "DataUnionOf"            : _n_ary(DataUnionOf,        read_data_range, 2),
  "DataComplementOf"       : _fixed(DataComplementOf,   read_data_range),
  "DataOneOf"              : _n_ary(DataOneOf,          read_literal, 1),
  "DatatypeRestriction"    : _read_datatype_restriction,
}

_CLASS_EXPRESSION_STARTS = frozenset(CLASS_EXPRESSIONS) | frozenset(["FULL_IRI", "PNAME"])
_DATA_RANGE_STARTS       = frozenset(DATA_RANGES)       | frozenset(["FULL_IRI", "PNAME"])
